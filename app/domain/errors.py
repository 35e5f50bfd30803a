"""Domain errors raised by the affordability engine."""

from typing import Any


class InvalidAssumption(ValueError):
    """Raised when a numeric input is malformed or outside its domain."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        """
        Initialize invalid assumption error.

        Args:
            field: Name of the offending input
            value: The rejected value
            reason: Human readable explanation
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class YearNotInProjection(LookupError):
    """Raised when a comparison asks for a year outside the computed rows."""

    def __init__(self, year: int, first_year: int, last_year: int) -> None:
        self.year = year
        self.first_year = first_year
        self.last_year = last_year
        super().__init__(
            f"Year {year} is outside the projection ({first_year}-{last_year}); "
            "re-run the projection with a wider horizon"
        )
