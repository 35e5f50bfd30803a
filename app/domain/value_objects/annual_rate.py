"""Annual percentage rate value object."""

from dataclasses import dataclass

from app.domain.validation import require_rate


@dataclass(frozen=True)
class AnnualRate:
    """Annual growth or interest rate expressed in percent (e.g., 7.0 for 7%)."""

    percent: float

    def __post_init__(self) -> None:
        """Validate rate."""
        require_rate("rate", self.percent)

    @property
    def as_decimal(self) -> float:
        """Get rate as decimal (e.g., 0.07 for 7%)."""
        return self.percent / 100

    @property
    def monthly_rate(self) -> float:
        """Get nominal monthly rate as decimal."""
        return self.as_decimal / 12

    @property
    def growth_factor(self) -> float:
        """Get one-year growth factor (e.g., 1.07 for 7%)."""
        return 1 + self.as_decimal
