"""Compounding and amortization primitives used by the projection engine.

Every function here is pure: no state, no I/O, no clock. Inputs outside their
domain raise InvalidAssumption instead of being clamped.
"""

from typing import Optional

from app.domain.entities.plan_inputs import (
    FamilyGift,
    FamilyLoan,
    FamilySupportTerms,
    GiftTiming,
    LoanRepaymentStyle,
    RepaymentSchedule,
)
from app.domain.errors import InvalidAssumption
from app.domain.validation import require_finite, require_non_negative, require_rate
from app.domain.value_objects.annual_rate import AnnualRate
from app.domain.value_objects.loan_term_years import LoanTermYears


def compound(base: float, annual_rate_pct: float, years: float) -> float:
    """
    Project a value forward at a fixed annual rate.

    Args:
        base: Starting value (may be negative, e.g. a savings deficit)
        annual_rate_pct: Annual rate in percent; negative means depreciation
        years: Number of years to compound (0 returns base unchanged)

    Returns:
        base * (1 + rate/100) ** years

    Raises:
        InvalidAssumption: If any input is non-finite, years is negative,
            or the rate is below -100%
    """
    require_finite("base", base)
    require_rate("annual_rate_pct", annual_rate_pct)
    require_non_negative("years", years)

    if years == 0:
        return base
    return base * AnnualRate(annual_rate_pct).growth_factor**years


def loan_capacity(
    monthly_income: float,
    monthly_expenses: float,
    interest_rate_pct: float,
    term_years: int,
) -> float:
    """
    Maximum principal the monthly surplus can service over the term.

    Uses the present value of an annuity:
    capacity = surplus * (1 - (1 + r) ** -n) / r
    where r is the monthly rate and n the number of months. With a zero
    rate there is no discounting: capacity = surplus * n.

    Args:
        monthly_income: Household income per month
        monthly_expenses: Outgoings per month (including any recurring debt service)
        interest_rate_pct: Annual mortgage rate in percent
        term_years: Mortgage term in years

    Returns:
        Loan capacity, 0 when there is no surplus
    """
    require_finite("monthly_income", monthly_income)
    require_finite("monthly_expenses", monthly_expenses)
    rate = AnnualRate(interest_rate_pct)
    term = LoanTermYears(term_years)

    surplus = monthly_income - monthly_expenses
    if surplus <= 0:
        return 0.0

    monthly_rate = rate.monthly_rate
    if monthly_rate == 0:
        return surplus * term.months

    return surplus * (1 - (1 + monthly_rate) ** -term.months) / monthly_rate


def monthly_payment(
    principal: float,
    interest_rate_pct: float,
    term_months: int,
    schedule: RepaymentSchedule = RepaymentSchedule.FIXED,
) -> float:
    """
    Monthly installment on a loan.

    FIXED uses the annuity formula M = P * r(1+r)^n / ((1+r)^n - 1).
    DECREASING returns the first (highest) installment: P/n + P*r.

    Args:
        principal: Borrowed amount
        interest_rate_pct: Annual rate in percent
        term_months: Number of monthly installments
        schedule: Repayment schedule

    Returns:
        Monthly payment, 0 when nothing is borrowed
    """
    require_finite("principal", principal)
    if principal <= 0:
        return 0.0
    if isinstance(term_months, bool) or not isinstance(term_months, int) or term_months <= 0:
        raise InvalidAssumption("term_months", term_months, "term must be a positive whole number of months")

    monthly_rate = AnnualRate(interest_rate_pct).monthly_rate
    if monthly_rate == 0:
        return principal / term_months

    if schedule == RepaymentSchedule.DECREASING:
        return principal / term_months + principal * monthly_rate

    growth = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * growth / (growth - 1)


def family_repayment(terms: Optional[FamilySupportTerms], year_offset: int) -> float:
    """
    Annual amount repaid to family in a given year offset.

    MONTHLY loans repay twelve equal installments in each of years 1..term;
    LUMP_SUM loans repay principal plus compounded interest in year `term`.
    Gifts are never repaid.
    """
    if not isinstance(terms, FamilyLoan):
        return 0.0

    if terms.repayment == LoanRepaymentStyle.MONTHLY:
        if 1 <= year_offset <= terms.term_years:
            return 12 * monthly_payment(terms.principal, terms.annual_rate_pct, terms.term_years * 12)
        return 0.0

    if year_offset == terms.term_years:
        return compound(terms.principal, terms.annual_rate_pct, terms.term_years)
    return 0.0


def family_monthly_burden(terms: Optional[FamilySupportTerms], year_offset: int) -> float:
    """Recurring monthly outflow a family loan imposes on disposable income."""
    if isinstance(terms, FamilyLoan) and terms.repayment == LoanRepaymentStyle.MONTHLY:
        return family_repayment(terms, year_offset) / 12
    return 0.0


def family_contribution(
    terms: Optional[FamilySupportTerms],
    year_offset: int,
    purchase_year_offset: int,
) -> float:
    """
    Net family-support cash flow for a year offset.

    Args:
        terms: Gift or loan terms, or None without family support
        year_offset: Year being simulated (0 = current year)
        purchase_year_offset: Offset of the planned purchase year

    Returns:
        Positive inflow (gift, loan principal) or negative repayment
    """
    if isinstance(year_offset, bool) or not isinstance(year_offset, int) or year_offset < 0:
        raise InvalidAssumption("year_offset", year_offset, "offset must be a non-negative whole number")

    if terms is None:
        return 0.0

    if isinstance(terms, FamilyGift):
        received_at = 0 if terms.timing == GiftTiming.NOW else purchase_year_offset
        return terms.amount if year_offset == received_at else 0.0

    if year_offset == 0:
        return terms.principal
    return -family_repayment(terms, year_offset)
