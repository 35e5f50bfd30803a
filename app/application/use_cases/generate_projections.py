"""Generate projections use case."""

from typing import Any, Callable, Optional

from app.application.dtos.projection import AffordabilityOutcome, ProjectionResult, ProjectionRow
from app.domain.entities.plan_inputs import PlanInputs
from app.domain.errors import InvalidAssumption
from app.domain.services.growth_model import (
    compound,
    family_contribution,
    family_monthly_burden,
    loan_capacity,
    monthly_payment,
)

# Income assumed for a spouse who has not declared one, as a share of the primary income
SPOUSE_INCOME_SHARE = 0.5


class GenerateProjections:
    """Use case for simulating a plan year by year until it becomes affordable."""

    # Years simulated past the target while still looking for an affordable year
    DEFAULT_EXTENSION_YEARS = 10

    def __init__(
        self,
        extension_years: int = DEFAULT_EXTENSION_YEARS,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize generate projections use case.

        Args:
            extension_years: Years to keep simulating beyond the target year
            logger: Optional logger function (plan_id, component, **kwargs)
        """
        if extension_years < 0:
            raise InvalidAssumption("extension_years", extension_years, "extension cannot be negative")
        self._extension_years = extension_years
        self._logger = logger

    def _log(self, plan_id: Optional[str], component: str, **kwargs: Any) -> None:
        """Log event if logger is available."""
        if self._logger:
            self._logger(plan_id or "unknown", component, **kwargs)

    def execute(
        self,
        inputs: PlanInputs,
        current_year: int,
        min_year_index: Optional[int] = None,
    ) -> list[ProjectionRow]:
        """
        Simulate the plan from the current year onward.

        Rows run from year index 0 through at least the target year. While the
        latest row is unaffordable the simulation continues, up to
        `extension_years` past the target, so an earliest viable year can
        still be found.

        Marriage and children scale living expenses from the year they occur,
        and an optional emergency-fund reserve is set aside out of savings.

        Args:
            inputs: Validated plan snapshot
            current_year: Calendar year of year index 0
            min_year_index: Simulate at least through this index

        Returns:
            Rows ordered by ascending year
        """
        target_index = inputs.years_to_purchase
        last_index = max(target_index + self._extension_years, min_year_index or 0)
        must_reach = max(target_index, min_year_index or 0)

        primary = inputs.monthly_income
        co_applicant = inputs.co_applicant_income
        declared_spouse = inputs.spouse_monthly_income
        base_expenses = inputs.monthly_living_expenses

        contribution = family_contribution(inputs.family_support, 0, target_index)
        expenses = base_expenses * inputs.expense_factor(0)
        reserve = expenses * inputs.emergency_fund_months
        rows = [
            self._build_row(
                inputs,
                current_year,
                0,
                inputs.target_house_price,
                self._household_income(inputs, 0, primary, co_applicant, declared_spouse),
                expenses,
                inputs.initial_savings + contribution - reserve,
                contribution,
                reserve,
            )
        ]

        for n in range(1, last_index + 1):
            previous = rows[-1]
            if n > must_reach and previous.is_affordable:
                break

            primary = compound(primary, inputs.pct_salary_growth, 1)
            co_applicant = compound(co_applicant, inputs.pct_salary_growth, 1)
            declared_spouse = compound(declared_spouse, inputs.pct_salary_growth, 1)
            base_expenses = compound(base_expenses, inputs.pct_expense_growth, 1)
            house_price = compound(previous.house_price, inputs.pct_house_growth, 1)

            monthly_income = self._household_income(inputs, n, primary, co_applicant, declared_spouse)
            expenses = base_expenses * inputs.expense_factor(n)

            # The reserve never shrinks; only its growth is taken from savings
            reserve = max(previous.emergency_fund_reserve, expenses * inputs.emergency_fund_months)
            top_up = reserve - previous.emergency_fund_reserve

            contribution = family_contribution(inputs.family_support, n, target_index)
            savings = (
                compound(previous.cumulative_savings, inputs.pct_investment_return, 1)
                + (monthly_income - expenses) * 12
                + contribution
                - top_up
            )
            rows.append(
                self._build_row(
                    inputs, current_year, n, house_price, monthly_income, expenses, savings, contribution, reserve
                )
            )

        return rows

    def evaluate(
        self,
        inputs: PlanInputs,
        current_year: int,
        plan_id: Optional[str] = None,
        min_year_index: Optional[int] = None,
    ) -> ProjectionResult:
        """
        Simulate the plan and classify when it becomes affordable.

        Args:
            inputs: Validated plan snapshot
            current_year: Calendar year of year index 0
            plan_id: Optional plan identifier for logging
            min_year_index: Simulate at least through this index

        Returns:
            Projection result with the earliest affordable year (None if the
            horizon was exhausted)
        """
        rows = self.execute(inputs, current_year, min_year_index=min_year_index)
        target_year = current_year + inputs.years_to_purchase
        earliest = self.find_earliest_affordable_year(rows)

        if earliest is None:
            outcome = AffordabilityOutcome.NOT_WITHIN_HORIZON
        elif earliest <= target_year:
            outcome = AffordabilityOutcome.WITHIN_TARGET
        else:
            outcome = AffordabilityOutcome.AFTER_TARGET

        self._log(
            plan_id,
            "projection",
            rows_count=len(rows),
            target_year=target_year,
            earliest_affordable_year=earliest,
            outcome=outcome.value,
        )

        return ProjectionResult(
            rows=rows,
            target_year=target_year,
            earliest_affordable_year=earliest,
            outcome=outcome,
        )

    @staticmethod
    def find_earliest_affordable_year(rows: list[ProjectionRow]) -> Optional[int]:
        """
        Find the first affordable calendar year.

        Args:
            rows: Projection rows in ascending year order

        Returns:
            Calendar year, or None when no row is affordable
        """
        for row in rows:
            if row.is_affordable:
                return row.year
        return None

    @staticmethod
    def _household_income(
        inputs: PlanInputs, n: int, primary: float, co_applicant: float, declared_spouse: float
    ) -> float:
        """Monthly household income for a year offset, spouse included once married."""
        spouse = 0.0
        if inputs.is_married_in(n):
            spouse = declared_spouse if declared_spouse > 0 else primary * SPOUSE_INCOME_SHARE
        return primary + co_applicant + spouse + inputs.monthly_other_income

    def _build_row(
        self,
        inputs: PlanInputs,
        current_year: int,
        n: int,
        house_price: float,
        monthly_income: float,
        expenses: float,
        savings: float,
        contribution: float,
        reserve: float,
    ) -> ProjectionRow:
        """Derive loan figures and the affordability flag for one year."""
        burden = family_monthly_burden(inputs.family_support, n)

        if inputs.uses_bank_loan:
            capacity = loan_capacity(
                monthly_income, expenses + burden, inputs.loan_interest_rate, inputs.loan_term_years
            )
        else:
            capacity = 0.0

        loan_required = max(0.0, house_price - savings)
        payment = monthly_payment(
            loan_required,
            inputs.loan_interest_rate,
            inputs.loan_term_years * 12,
            inputs.repayment_schedule,
        )

        return ProjectionRow(
            year_index=n,
            year=current_year + n,
            house_price=house_price,
            annual_income=monthly_income * 12,
            annual_expenses=expenses * 12,
            monthly_surplus=monthly_income - expenses - burden,
            cumulative_savings=savings,
            loan_required=loan_required,
            loan_capacity=capacity,
            family_contribution=contribution,
            monthly_payment=payment,
            ltv_ratio=(loan_required / house_price) * 100 if house_price > 0 else 0.0,
            is_affordable=savings + capacity >= house_price,
            emergency_fund_reserve=reserve,
        )
