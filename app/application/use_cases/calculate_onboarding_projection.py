"""Calculate onboarding projection use case."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from app.application.dtos.onboarding import OnboardingProjectionRequest, OnboardingProjectionResponse
from app.application.use_cases.generate_projections import GenerateProjections
from app.application.use_cases.user_messages_vi import UserMessagesVI
from app.domain.entities.plan_inputs import PlanInputs
from app.domain.errors import InvalidAssumption
from app.domain.value_objects.money_million import BILLION_TO_MILLION, MoneyMillion


def _offset(year: Optional[int], current_year: int) -> Optional[int]:
    """Convert an optional calendar year to an offset from the current year."""
    return None if year is None else year - current_year


@dataclass(frozen=True)
class DefaultAssumptions:
    """Product standard assumptions applied when the user has not customized them."""

    pct_salary_growth: float = 7.0
    pct_house_growth: float = 10.0
    pct_expense_growth: float = 4.0
    pct_investment_return: float = 9.0
    loan_interest_rate: float = 11.0
    loan_term_years: int = 25


class CalculateOnboardingProjection:
    """Use case adapting onboarding answers to the projection engine."""

    def __init__(
        self,
        projections: GenerateProjections,
        defaults: Optional[DefaultAssumptions] = None,
        price_unit_multiplier: float = BILLION_TO_MILLION,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize calculate onboarding projection use case.

        Args:
            projections: Projection engine
            defaults: Assumptions used for fields the request leaves empty
            price_unit_multiplier: Factor converting the submitted price unit to millions
            logger: Optional logger function (plan_id, component, **kwargs)
        """
        self._projections = projections
        self._defaults = defaults or DefaultAssumptions()
        self._price_unit_multiplier = price_unit_multiplier
        self._logger = logger

    def _log(self, plan_id: Optional[str], component: str, **kwargs: Any) -> None:
        """Log event if logger is available."""
        if self._logger:
            self._logger(plan_id or "unknown", component, **kwargs)

    def execute(
        self,
        request: OnboardingProjectionRequest,
        current_year: int,
        plan_id: Optional[str] = None,
    ) -> OnboardingProjectionResponse:
        """
        Validate onboarding answers, run the projection and phrase the verdict.

        Args:
            request: Onboarding answers
            current_year: Calendar year the request is evaluated in
            plan_id: Optional plan identifier for logging

        Returns:
            Response echoing the requested purchase year as selected_purchase_year
        """
        if request.purchase_year < current_year:
            self._log(
                plan_id,
                "validation",
                rejected_field="purchase_year",
                purchase_year=request.purchase_year,
                current_year=current_year,
            )
            return OnboardingProjectionResponse(
                success=False,
                message=UserMessagesVI.PAST_PURCHASE_YEAR,
                error="invalid_purchase_year",
            )

        try:
            inputs = self.to_plan_inputs(request, current_year)
            result = self._projections.evaluate(inputs, current_year, plan_id=plan_id)
        except InvalidAssumption as e:
            # Also covers assumptions that only overflow part way through the horizon
            self._log(plan_id, "validation", rejected_field=e.field, rejected_value=e.value)
            return OnboardingProjectionResponse(success=False, message=str(e), error="invalid_assumption")

        earliest = result.earliest_affordable_year
        is_affordable = earliest is not None and earliest <= request.purchase_year

        return OnboardingProjectionResponse(
            success=True,
            message=self._message(request.purchase_year, earliest),
            is_affordable=is_affordable,
            earliest_affordable_year=earliest,
            selected_purchase_year=request.purchase_year,
            projection=result,
        )

    def to_plan_inputs(self, request: OnboardingProjectionRequest, current_year: int) -> PlanInputs:
        """
        Convert onboarding answers to engine units.

        The price goes from billions to millions and the purchase year from a
        calendar year to an offset from the current year.
        """
        defaults = self._defaults
        price = MoneyMillion.from_billions(request.target_house_price, self._price_unit_multiplier)

        def pick(value: Optional[float], default: float) -> float:
            return default if value is None else value

        return PlanInputs(
            target_house_price=price.amount,
            years_to_purchase=request.purchase_year - current_year,
            initial_savings=request.initial_savings,
            monthly_income=request.monthly_income,
            monthly_living_expenses=request.monthly_expenses,
            pct_salary_growth=pick(request.pct_salary_growth, defaults.pct_salary_growth),
            pct_house_growth=pick(request.pct_house_growth, defaults.pct_house_growth),
            pct_expense_growth=pick(request.pct_expense_growth, defaults.pct_expense_growth),
            pct_investment_return=pick(request.pct_investment_return, defaults.pct_investment_return),
            loan_interest_rate=pick(request.loan_interest_rate, defaults.loan_interest_rate),
            loan_term_years=int(pick(request.loan_term_years, defaults.loan_term_years)),
            payment_method=request.payment_method,
            has_co_applicant=request.has_co_applicant,
            co_applicant_monthly_income=request.co_applicant_monthly_income,
            monthly_other_income=request.monthly_other_income,
            family_support=request.family_support.to_terms() if request.family_support else None,
            is_married=request.is_married,
            spouse_monthly_income=request.spouse_monthly_income,
            marriage_year_offset=_offset(request.marriage_year, current_year),
            pct_marriage_expense=request.pct_marriage_expense,
            dependents=request.dependents,
            child_year_offset=_offset(request.child_year, current_year),
            pct_child_expense=request.pct_child_expense,
            emergency_fund_months=request.emergency_fund_months,
        )

    @staticmethod
    def _message(purchase_year: int, earliest_year: Optional[int]) -> str:
        """Pick the verdict message."""
        if earliest_year is None:
            return UserMessagesVI.not_affordable(purchase_year)
        if earliest_year < purchase_year:
            return UserMessagesVI.affordable_earlier(purchase_year, earliest_year)
        if earliest_year == purchase_year:
            return UserMessagesVI.affordable_on_target(purchase_year)
        return UserMessagesVI.affordable_later(purchase_year, earliest_year)
