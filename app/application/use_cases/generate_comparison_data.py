"""Generate comparison data use case."""

from typing import Any, Callable, Optional

from app.application.dtos.comparison import ComparisonResult, TargetTiming, ViableYear
from app.application.dtos.projection import ProjectionRow
from app.domain.errors import YearNotInProjection


class GenerateComparisonData:
    """Use case for contrasting the earliest affordable year with the target year."""

    # The viable-years table reaches this far past the target year...
    YEARS_AFTER_TARGET = 3
    # ...or this far past the earliest affordable year, whichever is later
    YEARS_AFTER_EARLIEST = 5

    def __init__(self, logger: Optional[Callable[..., None]] = None) -> None:
        """
        Initialize generate comparison data use case.

        Args:
            logger: Optional logger function (plan_id, component, **kwargs)
        """
        self._logger = logger

    def execute(
        self,
        rows: list[ProjectionRow],
        earliest_year: int,
        target_year: int,
        plan_id: Optional[str] = None,
    ) -> ComparisonResult:
        """
        Compare two calendar years of an already computed projection.

        Args:
            rows: Projection rows in ascending year order
            earliest_year: Earliest affordable calendar year
            target_year: Purchase year confirmed by the user
            plan_id: Optional plan identifier for logging

        Returns:
            Comparison of both rows with target-minus-earliest deltas

        Raises:
            YearNotInProjection: If either year was not simulated
        """
        earliest = self._row_for(rows, earliest_year)
        target = self._row_for(rows, target_year)

        if target_year < earliest_year:
            timing = TargetTiming.EARLIER
        elif target_year > earliest_year:
            timing = TargetTiming.LATER
        else:
            timing = TargetTiming.SAME

        result = ComparisonResult(
            earliest=earliest,
            target=target,
            timing=timing,
            savings_difference=target.cumulative_savings - earliest.cumulative_savings,
            loan_difference=target.loan_required - earliest.loan_required,
            house_price_difference=target.house_price - earliest.house_price,
            monthly_payment_difference=target.monthly_payment - earliest.monthly_payment,
            viable_years=self._viable_years(rows, earliest_year, target_year),
        )

        if self._logger:
            self._logger(
                plan_id or "unknown",
                "comparison",
                earliest_year=earliest_year,
                target_year=target_year,
                timing=timing.value,
                viable_years_count=len(result.viable_years),
            )

        return result

    @staticmethod
    def _row_for(rows: list[ProjectionRow], year: int) -> ProjectionRow:
        """Get the row for a calendar year or fail."""
        for row in rows:
            if row.year == year:
                return row
        if rows:
            raise YearNotInProjection(year, rows[0].year, rows[-1].year)
        raise YearNotInProjection(year, year, year)

    def _viable_years(
        self, rows: list[ProjectionRow], earliest_year: int, target_year: int
    ) -> list[ViableYear]:
        """Summarize affordable rows from the earliest year to the end of the window."""
        max_year = max(target_year + self.YEARS_AFTER_TARGET, earliest_year + self.YEARS_AFTER_EARLIEST)
        return [
            ViableYear(
                year=row.year,
                house_price=row.house_price,
                monthly_surplus=row.monthly_surplus,
                monthly_payment=row.monthly_payment,
                buffer=row.monthly_surplus - row.monthly_payment,
                cumulative_savings=row.cumulative_savings,
            )
            for row in rows
            if row.is_affordable and earliest_year <= row.year <= max_year
        ]
