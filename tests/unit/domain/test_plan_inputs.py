"""Unit tests for PlanInputs entity."""

import math

import pytest

from app.domain.entities.plan_inputs import (
    FamilyGift,
    FamilyLoan,
    LoanRepaymentStyle,
    PaymentMethod,
    PlanInputs,
)
from app.domain.errors import InvalidAssumption


def make_inputs(**overrides) -> PlanInputs:
    """Build plan inputs with the quick-check example values."""
    values = {
        "target_house_price": 5000.0,
        "years_to_purchase": 3,
        "initial_savings": 500.0,
        "monthly_income": 30.0,
        "monthly_living_expenses": 10.0,
    }
    values.update(overrides)
    return PlanInputs(**values)


def test_plan_inputs_defaults():
    """Test product standard assumptions are the defaults."""
    inputs = make_inputs()

    assert inputs.pct_salary_growth == 7.0
    assert inputs.pct_house_growth == 10.0
    assert inputs.pct_expense_growth == 4.0
    assert inputs.pct_investment_return == 9.0
    assert inputs.loan_interest_rate == 11.0
    assert inputs.loan_term_years == 25
    assert inputs.payment_method == PaymentMethod.BANK_LOAN
    assert inputs.family_support is None


def test_plan_inputs_is_immutable():
    """Test that plan inputs cannot be mutated."""
    inputs = make_inputs()

    with pytest.raises(AttributeError):
        inputs.initial_savings = 1.0


def test_co_applicant_income_counted_only_when_flagged():
    """Test co-applicant income depends on the co-applicant flag."""
    assert make_inputs(co_applicant_monthly_income=20.0).co_applicant_income == 0.0
    assert make_inputs(has_co_applicant=True, co_applicant_monthly_income=20.0).co_applicant_income == 20.0


def test_cash_plan_does_not_use_bank_loan():
    """Test payment method switches the bank loan off."""
    assert make_inputs().uses_bank_loan is True
    assert make_inputs(payment_method=PaymentMethod.CASH).uses_bank_loan is False
    family_plan = make_inputs(payment_method=PaymentMethod.FAMILY_SUPPORT, family_support=FamilyGift(amount=100.0))
    assert family_plan.uses_bank_loan is True


def test_family_support_payment_requires_terms():
    """Test paying with family support needs gift or loan terms."""
    with pytest.raises(InvalidAssumption) as exc_info:
        make_inputs(payment_method=PaymentMethod.FAMILY_SUPPORT)

    assert exc_info.value.field == "family_support"


@pytest.mark.parametrize(
    "field,value",
    [
        ("pct_house_growth", -150.0),
        ("pct_salary_growth", math.nan),
        ("pct_investment_return", math.inf),
        ("monthly_income", math.nan),
        ("monthly_living_expenses", -1.0),
        ("initial_savings", -10.0),
        ("target_house_price", -5000.0),
        ("years_to_purchase", -1),
        ("loan_interest_rate", -2.0),
        ("loan_term_years", 0),
        ("spouse_monthly_income", -1.0),
        ("pct_marriage_expense", -5.0),
        ("pct_child_expense", math.nan),
        ("dependents", -1),
        ("dependents", 1.5),
        ("emergency_fund_months", -6),
        ("marriage_year_offset", 0),
        ("child_year_offset", -2),
    ],
)
def test_invalid_assumptions_raise_error(field, value):
    """Test out-of-domain values are rejected with the field name."""
    with pytest.raises(InvalidAssumption) as exc_info:
        make_inputs(**{field: value})

    assert exc_info.value.field == field


def test_negative_growth_rate_is_allowed():
    """Test depreciation assumptions are valid."""
    inputs = make_inputs(pct_house_growth=-3.0)

    assert inputs.pct_house_growth == -3.0


def test_family_support_terms_validation():
    """Test family support variants validate their own values."""
    with pytest.raises(InvalidAssumption, match="family_gift_amount"):
        FamilyGift(amount=-1.0)

    with pytest.raises(InvalidAssumption, match="family_loan_interest_rate"):
        FamilyLoan(principal=100.0, annual_rate_pct=-1.0, repayment=LoanRepaymentStyle.MONTHLY, term_years=2)

    with pytest.raises(InvalidAssumption, match="loan_term_years"):
        FamilyLoan(principal=100.0, annual_rate_pct=5.0, repayment=LoanRepaymentStyle.LUMP_SUM, term_years=0)


def test_life_events_are_off_by_default():
    """Test the baseline plan has no expense uplift."""
    inputs = make_inputs()

    assert inputs.is_married_in(10) is False
    assert inputs.children_in(10) == 0
    assert inputs.expense_factor(0) == 1.0
    assert inputs.emergency_fund_months == 0


def test_marriage_expense_starts_in_wedding_year():
    """Test a planned wedding switches the marriage uplift on."""
    inputs = make_inputs(marriage_year_offset=2, pct_marriage_expense=20.0)

    assert inputs.is_married_in(1) is False
    assert inputs.is_married_in(2) is True
    assert inputs.expense_factor(1) == 1.0
    assert inputs.expense_factor(2) == pytest.approx(1.2)


def test_married_household_has_uplift_from_year_zero():
    """Test an already married household pays the uplift immediately."""
    inputs = make_inputs(is_married=True, pct_marriage_expense=20.0)

    assert inputs.expense_factor(0) == pytest.approx(1.2)


def test_child_expense_counts_each_child():
    """Test existing dependents and a planned child each add the child uplift."""
    inputs = make_inputs(dependents=1, child_year_offset=3, pct_child_expense=10.0)

    assert inputs.children_in(2) == 1
    assert inputs.children_in(3) == 2
    assert inputs.expense_factor(2) == pytest.approx(1.1)
    assert inputs.expense_factor(3) == pytest.approx(1.2)
