"""Build milestones use case."""

import math
from typing import Any, Callable, Optional

from app.application.dtos.milestone import Milestone, MilestoneStatus
from app.domain.validation import require_finite, require_non_negative
from app.domain.value_objects.milestone_regime import (
    MilestoneRegime,
    MilestoneTemplate,
    regime_for_duration,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


class BuildMilestones:
    """Use case for turning a purchase horizon and target amount into a roadmap."""

    def __init__(self, logger: Optional[Callable[..., None]] = None) -> None:
        """
        Initialize build milestones use case.

        Args:
            logger: Optional logger function (plan_id, component, **kwargs)
        """
        self._logger = logger

    def execute(
        self,
        start_year: float,
        purchase_year: float,
        target_amount: float,
        current_savings: float,
        plan_id: Optional[str] = None,
    ) -> list[Milestone]:
        """
        Build the ordered roadmap and mark progress.

        Args:
            start_year: When the plan started (fractional years allowed)
            purchase_year: Confirmed purchase year (fractional years allowed)
            target_amount: Amount the percentages apply to (millions)
            current_savings: Savings accumulated so far (millions)
            plan_id: Optional plan identifier for logging

        Returns:
            Milestones with ids 1..n in roadmap order

        Raises:
            InvalidAssumption: If an amount is negative or any input is non-finite
        """
        require_finite("start_year", start_year)
        require_finite("purchase_year", purchase_year)
        require_non_negative("target_amount", target_amount)
        require_non_negative("current_savings", current_savings)

        regime = regime_for_duration(purchase_year - start_year)
        templates = self.merge_templates(regime)

        milestones = [
            Milestone(
                id=index,
                title=template.title,
                status=MilestoneStatus(template.status),
                percent=template.percent,
                amount_label=template.amount_label,
                amount_value=(
                    round_half_up(template.percent / 100 * target_amount)
                    if template.percent is not None
                    else None
                ),
            )
            for index, template in enumerate(templates, start=1)
        ]
        milestones = self.assign_statuses(milestones, current_savings)

        if self._logger:
            self._logger(
                plan_id or "unknown",
                "milestones",
                regime=regime.name,
                milestones_count=len(milestones),
                current_milestone_id=next(
                    (m.id for m in milestones if m.status == MilestoneStatus.CURRENT), None
                ),
            )

        return milestones

    @staticmethod
    def merge_templates(regime: MilestoneRegime) -> list[MilestoneTemplate]:
        """
        Interleave the regime's extra checkpoints with its base milestones.

        Extras follow the base milestone they are attached to, in ascending
        percent order. An extra at the same percent as that base milestone is
        dropped.
        """
        merged: list[MilestoneTemplate] = []
        for base in regime.base:
            merged.append(base)
            for extra in regime.extras:
                if extra.after != base.title:
                    continue
                for percent in sorted(extra.percents):
                    if base.percent is not None and base.percent == percent:
                        continue
                    merged.append(MilestoneTemplate(title=extra.title, percent=percent))
        return merged

    @staticmethod
    def assign_statuses(milestones: list[Milestone], current_savings: float) -> list[Milestone]:
        """
        Mark amount-based milestones done, current or upcoming.

        Milestones without an amount keep their status. Once a milestone is
        current, every later amount-based milestone is upcoming.
        """
        current_marked = False
        result: list[Milestone] = []
        for milestone in milestones:
            if milestone.amount_value is None:
                result.append(milestone)
                continue

            if current_marked:
                status = MilestoneStatus.UPCOMING
            elif current_savings >= milestone.amount_value:
                status = MilestoneStatus.DONE
            else:
                status = MilestoneStatus.CURRENT
                current_marked = True
            result.append(milestone.model_copy(update={"status": status}))
        return result
