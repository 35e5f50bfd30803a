"""Milestone progress tracking use case."""

from typing import Optional

from app.application.dtos.milestone import Milestone, MilestoneStatus
from app.application.use_cases.build_milestones import BuildMilestones, round_half_up
from app.domain.validation import require_finite, require_non_negative


class MilestoneProgress:
    """Use case for updating roadmap progress as savings change."""

    def savings_percentage(self, current_savings: float, house_price: float) -> int:
        """
        Get savings as a whole percentage of the house price.

        Args:
            current_savings: Savings so far
            house_price: Projected house price for the purchase year

        Returns:
            Rounded percentage, 0 when the price is not positive
        """
        require_non_negative("current_savings", current_savings)
        require_finite("house_price", house_price)
        if house_price <= 0:
            return 0
        return round_half_up(current_savings / house_price * 100)

    def apply_savings_change(self, current_savings: float, amount: float) -> float:
        """
        Add a deposit (or subtract a withdrawal) from current savings.

        Savings never drop below zero.
        """
        require_finite("current_savings", current_savings)
        require_finite("amount", amount)
        return max(0.0, current_savings + amount)

    def refresh(self, milestones: list[Milestone], current_savings: float) -> list[Milestone]:
        """
        Re-run the status pass for new savings.

        Args:
            milestones: Previously built roadmap
            current_savings: Updated savings

        Returns:
            Same milestones with recomputed statuses
        """
        require_non_negative("current_savings", current_savings)
        return BuildMilestones.assign_statuses(milestones, current_savings)

    @staticmethod
    def current_milestone(milestones: list[Milestone]) -> Optional[Milestone]:
        """Get the milestone currently being worked on, if any."""
        return next((m for m in milestones if m.status == MilestoneStatus.CURRENT), None)

    @staticmethod
    def completed_count(milestones: list[Milestone]) -> int:
        """Count amount-based milestones already reached."""
        return sum(1 for m in milestones if m.is_amount_based and m.status == MilestoneStatus.DONE)
