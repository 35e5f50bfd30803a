"""Money in millions value object."""

from dataclasses import dataclass

from app.domain.validation import require_non_negative

BILLION_TO_MILLION = 1000


@dataclass(frozen=True)
class MoneyMillion:
    """Non-negative money amount in the engine's base unit (millions)."""

    amount: float

    def __post_init__(self) -> None:
        """Validate money amount."""
        require_non_negative("amount", self.amount)

    @classmethod
    def from_billions(cls, billions: float, multiplier: float = BILLION_TO_MILLION) -> "MoneyMillion":
        """
        Convert an amount expressed in billions.

        Args:
            billions: Amount in billions
            multiplier: Billions to millions factor

        Returns:
            Money in millions
        """
        return cls(billions * multiplier)
