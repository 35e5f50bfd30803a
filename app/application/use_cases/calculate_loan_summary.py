"""Calculate loan summary use case."""

from app.application.dtos.loan import LoanSummary
from app.application.dtos.projection import ProjectionRow
from app.domain.services.growth_model import loan_capacity
from app.domain.value_objects.loan_term_years import LoanTermYears


class CalculateLoanSummary:
    """Use case for mortgage metrics of a chosen purchase year."""

    def calculate(self, row: ProjectionRow, loan_term_years: int) -> LoanSummary:
        """
        Calculate loan metrics for the purchase year.

        Args:
            row: Projection row of the purchase year
            loan_term_years: Mortgage term in years

        Returns:
            Loan summary; ratios are 0 when their denominator is 0
        """
        term = LoanTermYears(loan_term_years)

        # Term only matters when something is actually borrowed
        paying_years = term.years if row.loan_required > 0 else 0
        monthly_income = row.annual_income / 12
        buffer = row.monthly_surplus - row.monthly_payment

        return LoanSummary(
            loan_amount=row.loan_required,
            down_payment_amount=row.cumulative_savings,
            down_payment_percentage=(
                row.cumulative_savings / row.house_price * 100 if row.house_price > 0 else 0.0
            ),
            monthly_payment=row.monthly_payment,
            total_payments=row.monthly_payment * 12 * paying_years,
            payment_to_income_ratio=(
                row.monthly_payment / monthly_income * 100 if monthly_income > 0 else 0.0
            ),
            buffer_amount=buffer,
            buffer_percentage=buffer / row.monthly_payment * 100 if row.monthly_payment > 0 else 0.0,
        )

    def additional_savings_for_viability(
        self,
        row: ProjectionRow,
        loan_interest_rate: float,
        loan_term_years: int,
    ) -> int:
        """
        Extra savings the year would need for savings plus capacity to cover the price.

        Args:
            row: Projection row of the target year
            loan_interest_rate: Annual mortgage rate in percent
            loan_term_years: Mortgage term in years

        Returns:
            Rounded shortfall, never negative
        """
        capacity = loan_capacity(
            row.annual_income / 12,
            row.annual_expenses / 12,
            loan_interest_rate,
            loan_term_years,
        )
        min_down_payment = max(0.0, row.house_price - capacity)
        return round(max(0.0, min_down_payment - row.cumulative_savings))
