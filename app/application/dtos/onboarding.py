"""Onboarding projection DTOs."""

from typing import Literal, Optional

from pydantic import ConfigDict, Field

from app.application.dtos.base import DTO
from app.application.dtos.projection import ProjectionResult
from app.domain.entities.plan_inputs import (
    FamilyGift,
    FamilyLoan,
    FamilySupportTerms,
    GiftTiming,
    LoanRepaymentStyle,
    PaymentMethod,
)


class FamilySupportRequest(DTO):
    """Family support answers collected during onboarding (amounts in millions)."""

    kind: Literal["gift", "loan"]
    amount: float = Field(ge=0, allow_inf_nan=False)
    gift_timing: GiftTiming = GiftTiming.NOW
    loan_interest_rate: float = Field(default=0.0, ge=0, le=100, allow_inf_nan=False)
    loan_repayment: LoanRepaymentStyle = LoanRepaymentStyle.MONTHLY
    loan_term_years: int = Field(default=1, gt=0)

    def to_terms(self) -> FamilySupportTerms:
        """Map answers to the engine's family support variant."""
        if self.kind == "gift":
            return FamilyGift(amount=self.amount, timing=self.gift_timing)
        return FamilyLoan(
            principal=self.amount,
            annual_rate_pct=self.loan_interest_rate,
            repayment=self.loan_repayment,
            term_years=self.loan_term_years,
        )


class OnboardingProjectionRequest(DTO):
    """
    Quick-check answers as the onboarding flow submits them.

    The purchase year is an absolute calendar year and the house price is in
    billions; savings, income and expenses are already in millions.
    Assumptions left as None fall back to the product defaults.
    """

    purchase_year: int
    target_house_price: float = Field(gt=0, allow_inf_nan=False)
    initial_savings: float = Field(ge=0, allow_inf_nan=False)
    monthly_income: float = Field(ge=0, allow_inf_nan=False)
    monthly_expenses: float = Field(ge=0, allow_inf_nan=False)
    has_co_applicant: bool = False
    co_applicant_monthly_income: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    monthly_other_income: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    pct_salary_growth: Optional[float] = Field(default=None, ge=-100, allow_inf_nan=False)
    pct_house_growth: Optional[float] = Field(default=None, ge=-100, allow_inf_nan=False)
    pct_expense_growth: Optional[float] = Field(default=None, ge=-100, allow_inf_nan=False)
    pct_investment_return: Optional[float] = Field(default=None, ge=-100, allow_inf_nan=False)
    loan_interest_rate: Optional[float] = Field(default=None, ge=0, le=100, allow_inf_nan=False)
    loan_term_years: Optional[int] = Field(default=None, gt=0)
    payment_method: PaymentMethod = PaymentMethod.BANK_LOAN
    family_support: Optional[FamilySupportRequest] = None
    is_married: bool = False
    spouse_monthly_income: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    marriage_year: Optional[int] = None  # planned wedding, calendar year
    pct_marriage_expense: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    dependents: int = Field(default=0, ge=0)
    child_year: Optional[int] = None  # planned child, calendar year
    pct_child_expense: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    emergency_fund_months: int = Field(default=0, ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "purchase_year": 2028,
                "target_house_price": 5,
                "initial_savings": 500,
                "monthly_income": 30,
                "monthly_expenses": 10,
            }
        }
    )


class OnboardingProjectionResponse(DTO):
    """Affordability verdict returned to the onboarding flow."""

    success: bool
    message: str
    error: Optional[str] = None
    is_affordable: Optional[bool] = None
    earliest_affordable_year: Optional[int] = None
    selected_purchase_year: Optional[int] = None
    projection: Optional[ProjectionResult] = None
