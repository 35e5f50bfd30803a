"""Unit tests for CalculateOnboardingProjection use case."""

from typing import Any, Optional

import pytest
from pydantic import ValidationError

from app.application.dtos.onboarding import FamilySupportRequest, OnboardingProjectionRequest
from app.application.dtos.projection import AffordabilityOutcome, ProjectionResult
from app.application.use_cases.calculate_onboarding_projection import (
    CalculateOnboardingProjection,
    DefaultAssumptions,
)
from app.application.use_cases.generate_projections import GenerateProjections
from app.application.use_cases.user_messages_vi import UserMessagesVI
from app.domain.entities.plan_inputs import FamilyGift, FamilyLoan, GiftTiming, LoanRepaymentStyle, PlanInputs

CURRENT_YEAR = 2025


class FakeGenerateProjections:
    """Projection engine double returning a fixed earliest year."""

    def __init__(self, earliest_year: Optional[int]) -> None:
        self.earliest_year = earliest_year
        self.calls: list[tuple[PlanInputs, int]] = []

    def evaluate(self, inputs: PlanInputs, current_year: int, plan_id: Optional[str] = None, **kwargs: Any):
        self.calls.append((inputs, current_year))
        target_year = current_year + inputs.years_to_purchase
        if self.earliest_year is None:
            outcome = AffordabilityOutcome.NOT_WITHIN_HORIZON
        elif self.earliest_year <= target_year:
            outcome = AffordabilityOutcome.WITHIN_TARGET
        else:
            outcome = AffordabilityOutcome.AFTER_TARGET
        return ProjectionResult(
            rows=[],
            target_year=target_year,
            earliest_affordable_year=self.earliest_year,
            outcome=outcome,
        )


def make_request(**overrides: Any) -> OnboardingProjectionRequest:
    """Build the quick-check onboarding answers."""
    values: dict[str, Any] = {
        "purchase_year": 2028,
        "target_house_price": 5,
        "initial_savings": 500,
        "monthly_income": 30,
        "monthly_expenses": 10,
    }
    values.update(overrides)
    return OnboardingProjectionRequest(**values)


class TestCalculateOnboardingProjection:
    """Test cases for CalculateOnboardingProjection."""

    def test_converts_units_for_engine(self) -> None:
        """Test billions become millions and the year becomes an offset."""
        engine = FakeGenerateProjections(earliest_year=2028)
        use_case = CalculateOnboardingProjection(engine)

        use_case.execute(make_request(), CURRENT_YEAR)

        inputs, current_year = engine.calls[0]
        assert current_year == CURRENT_YEAR
        assert inputs.target_house_price == 5000.0
        assert inputs.years_to_purchase == 3
        assert inputs.initial_savings == 500
        assert inputs.monthly_income == 30
        assert inputs.monthly_living_expenses == 10

    def test_applies_default_assumptions(self) -> None:
        """Test omitted assumptions use the configured defaults."""
        defaults = DefaultAssumptions(pct_house_growth=6.0, loan_term_years=20)
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(2028), defaults=defaults)

        inputs = use_case.to_plan_inputs(make_request(pct_salary_growth=5.0), CURRENT_YEAR)

        assert inputs.pct_salary_growth == 5.0
        assert inputs.pct_house_growth == 6.0
        assert inputs.pct_expense_growth == 4.0
        assert inputs.pct_investment_return == 9.0
        assert inputs.loan_interest_rate == 11.0
        assert inputs.loan_term_years == 20

    def test_explicit_zero_overrides_default(self) -> None:
        """Test 0% is a real answer, not a missing one."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(2028))

        inputs = use_case.to_plan_inputs(make_request(pct_house_growth=0.0), CURRENT_YEAR)

        assert inputs.pct_house_growth == 0.0

    def test_affordable_on_target_year(self) -> None:
        """Test the selected year is echoed and the verdict is affordable."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(earliest_year=2028))

        response = use_case.execute(make_request(), CURRENT_YEAR)

        assert response.success is True
        assert response.is_affordable is True
        assert response.earliest_affordable_year == 2028
        assert response.selected_purchase_year == 2028
        assert response.message == UserMessagesVI.affordable_on_target(2028)

    def test_selected_year_is_not_earliest_year(self) -> None:
        """Test the requested year is returned even when an earlier one works."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(earliest_year=2026))

        response = use_case.execute(make_request(), CURRENT_YEAR)

        assert response.is_affordable is True
        assert response.earliest_affordable_year == 2026
        assert response.selected_purchase_year == 2028
        assert response.message == UserMessagesVI.affordable_earlier(2028, 2026)

    def test_affordable_only_later(self) -> None:
        """Test a later earliest year is not affordable on target."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(earliest_year=2031))

        response = use_case.execute(make_request(), CURRENT_YEAR)

        assert response.success is True
        assert response.is_affordable is False
        assert response.message == UserMessagesVI.affordable_later(2028, 2031)

    def test_not_affordable_within_horizon(self) -> None:
        """Test no earliest year at all."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(earliest_year=None))

        response = use_case.execute(make_request(), CURRENT_YEAR)

        assert response.is_affordable is False
        assert response.earliest_affordable_year is None
        assert response.projection.horizon_exceeded is True
        assert response.message == UserMessagesVI.not_affordable(2028)

    def test_past_purchase_year_rejected(self) -> None:
        """Test a year before the current year never reaches the engine."""
        engine = FakeGenerateProjections(earliest_year=2028)
        events: list[tuple[str, str, dict[str, Any]]] = []

        def _logger(plan_id: str, component: str, **kwargs: Any) -> None:
            events.append((plan_id, component, kwargs))

        use_case = CalculateOnboardingProjection(engine, logger=_logger)

        response = use_case.execute(make_request(purchase_year=2024), CURRENT_YEAR, plan_id="plan_2")

        assert response.success is False
        assert response.error == "invalid_purchase_year"
        assert response.message == UserMessagesVI.PAST_PURCHASE_YEAR
        assert response.projection is None
        assert engine.calls == []
        assert events[0][1] == "validation"
        assert events[0][2]["rejected_field"] == "purchase_year"

    def test_current_year_purchase_allowed(self) -> None:
        """Test buying this year is a valid answer."""
        engine = FakeGenerateProjections(earliest_year=2025)
        use_case = CalculateOnboardingProjection(engine)

        response = use_case.execute(make_request(purchase_year=2025), CURRENT_YEAR)

        assert response.success is True
        assert engine.calls[0][0].years_to_purchase == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"target_house_price": 0},
            {"monthly_income": -1},
            {"initial_savings": float("nan")},
            {"loan_term_years": 0},
            {"unexpected": 1},
        ],
    )
    def test_malformed_request_rejected(self, overrides) -> None:
        """Test request validation."""
        with pytest.raises(ValidationError):
            make_request(**overrides)

    def test_family_gift_mapping(self) -> None:
        """Test gift answers become engine terms."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(2028))
        request = make_request(
            family_support=FamilySupportRequest(kind="gift", amount=300, gift_timing=GiftTiming.AT_PURCHASE)
        )

        inputs = use_case.to_plan_inputs(request, CURRENT_YEAR)

        assert inputs.family_support == FamilyGift(amount=300, timing=GiftTiming.AT_PURCHASE)

    def test_family_loan_mapping(self) -> None:
        """Test loan answers become engine terms."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(2028))
        request = make_request(
            family_support={
                "kind": "loan",
                "amount": 400,
                "loan_interest_rate": 2.0,
                "loan_repayment": "lump_sum",
                "loan_term_years": 5,
            }
        )

        inputs = use_case.to_plan_inputs(request, CURRENT_YEAR)

        assert inputs.family_support == FamilyLoan(
            principal=400, annual_rate_pct=2.0, repayment=LoanRepaymentStyle.LUMP_SUM, term_years=5
        )

    def test_with_real_engine(self) -> None:
        """Test the adapter against the projection engine."""
        use_case = CalculateOnboardingProjection(GenerateProjections())

        response = use_case.execute(make_request(initial_savings=10000), CURRENT_YEAR, plan_id="plan_3")

        assert response.success is True
        assert response.is_affordable is True
        assert response.earliest_affordable_year == 2025
        assert response.selected_purchase_year == 2028
        assert response.projection.rows[0].house_price == 5000.0
        assert response.projection.outcome == AffordabilityOutcome.WITHIN_TARGET

    def test_assumption_overflowing_during_run_is_rejected(self) -> None:
        """Test a growth rate that overflows mid-horizon becomes a failed response."""
        events: list[tuple[str, str, dict[str, Any]]] = []

        def _logger(plan_id: str, component: str, **kwargs: Any) -> None:
            events.append((plan_id, component, kwargs))

        use_case = CalculateOnboardingProjection(GenerateProjections(), logger=_logger)

        response = use_case.execute(make_request(pct_house_growth=1e200), CURRENT_YEAR)

        assert response.success is False
        assert response.error == "invalid_assumption"
        assert response.projection is None
        assert events[-1][1] == "validation"

    def test_family_support_payment_without_terms_rejected(self) -> None:
        """Test paying with family support needs support terms."""
        engine = FakeGenerateProjections(earliest_year=2028)
        use_case = CalculateOnboardingProjection(engine)

        response = use_case.execute(make_request(payment_method="FamilySupport"), CURRENT_YEAR)

        assert response.success is False
        assert response.error == "invalid_assumption"
        assert "family_support" in response.message
        assert engine.calls == []

    def test_life_event_mapping(self) -> None:
        """Test calendar years of life events become offsets."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(2028))
        request = make_request(
            marriage_year=2027,
            pct_marriage_expense=20,
            child_year=2029,
            pct_child_expense=10,
            dependents=1,
            emergency_fund_months=6,
        )

        inputs = use_case.to_plan_inputs(request, CURRENT_YEAR)

        assert inputs.marriage_year_offset == 2
        assert inputs.child_year_offset == 4
        assert inputs.pct_marriage_expense == 20
        assert inputs.dependents == 1
        assert inputs.emergency_fund_months == 6

    def test_life_event_in_current_year_rejected(self) -> None:
        """Test a planned wedding must lie in a future year."""
        use_case = CalculateOnboardingProjection(FakeGenerateProjections(2028))

        response = use_case.execute(make_request(marriage_year=2025), CURRENT_YEAR)

        assert response.success is False
        assert response.error == "invalid_assumption"
