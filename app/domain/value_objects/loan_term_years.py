"""Loan term in years value object."""

from dataclasses import dataclass

from app.domain.errors import InvalidAssumption


@dataclass(frozen=True)
class LoanTermYears:
    """Loan term in whole years."""

    years: int

    def __post_init__(self) -> None:
        """Validate loan term."""
        if isinstance(self.years, bool) or not isinstance(self.years, int):
            raise InvalidAssumption("loan_term_years", self.years, "term must be a whole number of years")
        if self.years <= 0:
            raise InvalidAssumption("loan_term_years", self.years, "term must be positive")

    @property
    def months(self) -> int:
        """Get loan term in months."""
        return self.years * 12
