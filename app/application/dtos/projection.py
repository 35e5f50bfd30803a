"""Projection DTOs."""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict

from app.application.dtos.base import DTO


class ProjectionRow(DTO):
    """One simulated year of the household's finances."""

    year_index: int  # 0 = current year
    year: int  # calendar year
    house_price: float
    annual_income: float
    annual_expenses: float
    monthly_surplus: float
    cumulative_savings: float
    loan_required: float
    loan_capacity: float
    family_contribution: float
    monthly_payment: float
    ltv_ratio: float
    is_affordable: bool
    emergency_fund_reserve: float = 0.0  # savings set aside and not available for the purchase

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "year_index": 0,
                "year": 2025,
                "house_price": 5000.0,
                "annual_income": 360.0,
                "annual_expenses": 120.0,
                "monthly_surplus": 20.0,
                "cumulative_savings": 500.0,
                "loan_required": 4500.0,
                "loan_capacity": 2040.6,
                "family_contribution": 0.0,
                "monthly_payment": 44.1,
                "ltv_ratio": 90.0,
                "is_affordable": False,
                "emergency_fund_reserve": 0.0,
            }
        }
    )


class AffordabilityOutcome(str, Enum):
    """When, if ever, the plan becomes affordable."""

    WITHIN_TARGET = "within_target"  # affordable on or before the target year
    AFTER_TARGET = "after_target"  # affordable only after the target year
    NOT_WITHIN_HORIZON = "not_within_horizon"  # nothing affordable before the horizon cap


class ProjectionResult(DTO):
    """Projection rows plus the affordability verdict derived from them."""

    rows: list[ProjectionRow]
    target_year: int
    earliest_affordable_year: Optional[int] = None
    outcome: AffordabilityOutcome

    @property
    def horizon_exceeded(self) -> bool:
        """Check whether no affordable year was found within the horizon."""
        return self.earliest_affordable_year is None

    def row_for_year(self, year: int) -> Optional[ProjectionRow]:
        """
        Get the row for a calendar year.

        Args:
            year: Calendar year

        Returns:
            Matching row or None if the year was not simulated
        """
        return next((row for row in self.rows if row.year == year), None)
