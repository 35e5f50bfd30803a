"""Plan inputs entity consumed by the projection engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from app.domain.errors import InvalidAssumption
from app.domain.validation import require_non_negative, require_rate
from app.domain.value_objects.loan_term_years import LoanTermYears


class PaymentMethod(str, Enum):
    """How the household intends to pay for the house."""

    CASH = "Cash"
    BANK_LOAN = "BankLoan"
    FAMILY_SUPPORT = "FamilySupport"


class RepaymentSchedule(str, Enum):
    """Bank mortgage repayment schedule."""

    FIXED = "fixed"  # annuity, equal monthly installments
    DECREASING = "decreasing"  # equal principal, interest on outstanding balance


class GiftTiming(str, Enum):
    """When a family gift is received."""

    NOW = "now"
    AT_PURCHASE = "at_purchase"


class LoanRepaymentStyle(str, Enum):
    """How a family loan is paid back."""

    MONTHLY = "monthly"
    LUMP_SUM = "lump_sum"


@dataclass(frozen=True)
class FamilyGift:
    """Non-repayable family gift."""

    amount: float
    timing: GiftTiming = GiftTiming.NOW

    def __post_init__(self) -> None:
        """Validate gift."""
        require_non_negative("family_gift_amount", self.amount)


@dataclass(frozen=True)
class FamilyLoan:
    """Repayable family loan with its own rate and schedule."""

    principal: float
    annual_rate_pct: float
    repayment: LoanRepaymentStyle
    term_years: int

    def __post_init__(self) -> None:
        """Validate loan."""
        require_non_negative("family_loan_principal", self.principal)
        require_rate("family_loan_interest_rate", self.annual_rate_pct)
        if self.annual_rate_pct < 0:
            raise InvalidAssumption(
                "family_loan_interest_rate", self.annual_rate_pct, "interest rate cannot be negative"
            )
        LoanTermYears(self.term_years)


FamilySupportTerms = Union[FamilyGift, FamilyLoan]


def _require_count(field: str, value: int, minimum: int) -> None:
    """Reject non-integers and counts below minimum."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAssumption(field, value, "value must be a whole number")
    if value < minimum:
        raise InvalidAssumption(field, value, f"value cannot be below {minimum}")


@dataclass(frozen=True)
class PlanInputs:
    """
    Immutable snapshot of a user's financial plan.

    Monetary values are in millions; monthly values are per month in year 0.
    """

    target_house_price: float
    years_to_purchase: int
    initial_savings: float
    monthly_income: float
    monthly_living_expenses: float
    pct_salary_growth: float = 7.0
    pct_house_growth: float = 10.0
    pct_expense_growth: float = 4.0
    pct_investment_return: float = 9.0
    loan_interest_rate: float = 11.0
    loan_term_years: int = 25
    payment_method: PaymentMethod = PaymentMethod.BANK_LOAN
    repayment_schedule: RepaymentSchedule = RepaymentSchedule.FIXED
    has_co_applicant: bool = False
    co_applicant_monthly_income: float = 0.0
    monthly_other_income: float = 0.0
    family_support: Optional[FamilySupportTerms] = None
    # Household life events; all off by default
    is_married: bool = False
    spouse_monthly_income: float = 0.0  # 0 means half of the primary income once married
    marriage_year_offset: Optional[int] = None
    pct_marriage_expense: float = 0.0
    dependents: int = 0
    child_year_offset: Optional[int] = None
    pct_child_expense: float = 0.0  # per child
    emergency_fund_months: int = 0

    def __post_init__(self) -> None:
        """Validate every numeric assumption."""
        require_non_negative("target_house_price", self.target_house_price)
        if isinstance(self.years_to_purchase, bool) or not isinstance(self.years_to_purchase, int):
            raise InvalidAssumption(
                "years_to_purchase", self.years_to_purchase, "horizon must be a whole number of years"
            )
        if self.years_to_purchase < 0:
            raise InvalidAssumption("years_to_purchase", self.years_to_purchase, "horizon cannot be negative")

        require_non_negative("initial_savings", self.initial_savings)
        require_non_negative("monthly_income", self.monthly_income)
        require_non_negative("monthly_living_expenses", self.monthly_living_expenses)
        require_non_negative("co_applicant_monthly_income", self.co_applicant_monthly_income)
        require_non_negative("monthly_other_income", self.monthly_other_income)

        require_rate("pct_salary_growth", self.pct_salary_growth)
        require_rate("pct_house_growth", self.pct_house_growth)
        require_rate("pct_expense_growth", self.pct_expense_growth)
        require_rate("pct_investment_return", self.pct_investment_return)
        require_rate("loan_interest_rate", self.loan_interest_rate)
        if self.loan_interest_rate < 0:
            raise InvalidAssumption("loan_interest_rate", self.loan_interest_rate, "interest rate cannot be negative")

        LoanTermYears(self.loan_term_years)

        if self.payment_method == PaymentMethod.FAMILY_SUPPORT and self.family_support is None:
            raise InvalidAssumption(
                "family_support", self.family_support, "family support payment requires support terms"
            )

        require_non_negative("spouse_monthly_income", self.spouse_monthly_income)
        require_non_negative("pct_marriage_expense", self.pct_marriage_expense)
        require_non_negative("pct_child_expense", self.pct_child_expense)
        _require_count("dependents", self.dependents, minimum=0)
        _require_count("emergency_fund_months", self.emergency_fund_months, minimum=0)
        if self.marriage_year_offset is not None:
            _require_count("marriage_year_offset", self.marriage_year_offset, minimum=1)
        if self.child_year_offset is not None:
            _require_count("child_year_offset", self.child_year_offset, minimum=1)

    @property
    def co_applicant_income(self) -> float:
        """Get year-0 co-applicant income, counted only when the flag is set."""
        return self.co_applicant_monthly_income if self.has_co_applicant else 0.0

    def is_married_in(self, year_offset: int) -> bool:
        """Check whether the household is married in a year offset."""
        if self.is_married:
            return True
        return self.marriage_year_offset is not None and year_offset >= self.marriage_year_offset

    def children_in(self, year_offset: int) -> int:
        """Count dependents in a year offset, including a planned child once born."""
        born = 1 if self.child_year_offset is not None and year_offset >= self.child_year_offset else 0
        return self.dependents + born

    def expense_factor(self, year_offset: int) -> float:
        """
        Multiplier applied to living expenses in a year offset.

        Marriage adds its percentage once married; each child adds its own.
        """
        marriage = self.pct_marriage_expense if self.is_married_in(year_offset) else 0.0
        children = self.pct_child_expense * self.children_in(year_offset)
        return 1 + marriage / 100 + children / 100

    @property
    def uses_bank_loan(self) -> bool:
        """Check whether a bank mortgage is part of the plan."""
        return self.payment_method != PaymentMethod.CASH
