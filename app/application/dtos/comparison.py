"""Comparison DTOs."""

from enum import Enum

from app.application.dtos.base import DTO
from app.application.dtos.projection import ProjectionRow


class TargetTiming(str, Enum):
    """Position of the target year relative to the earliest affordable year."""

    EARLIER = "earlier"
    SAME = "same"
    LATER = "later"


class ViableYear(DTO):
    """Affordable year summary shown in the comparison table."""

    year: int
    house_price: float
    monthly_surplus: float
    monthly_payment: float
    buffer: float
    cumulative_savings: float


class ComparisonResult(DTO):
    """Earliest affordable year contrasted with the user's target year."""

    earliest: ProjectionRow
    target: ProjectionRow
    timing: TargetTiming
    savings_difference: float  # target - earliest
    loan_difference: float  # target - earliest
    house_price_difference: float  # target - earliest
    monthly_payment_difference: float  # target - earliest
    viable_years: list[ViableYear]
