"""Milestone DTOs."""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict

from app.application.dtos.base import DTO


class MilestoneStatus(str, Enum):
    """Progress status of a roadmap milestone."""

    DONE = "done"
    CURRENT = "current"
    UPCOMING = "upcoming"


class Milestone(DTO):
    """Savings checkpoint on the purchase roadmap."""

    id: int
    title: str
    status: MilestoneStatus
    percent: Optional[int] = None
    amount_label: Optional[str] = None  # time-based milestones carry a label instead of a percent
    amount_value: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 4,
                "title": "Goal 4",
                "status": "current",
                "percent": 50,
                "amount_label": None,
                "amount_value": 2500,
            }
        }
    )

    @property
    def is_amount_based(self) -> bool:
        """Check whether the milestone is reached by saving an amount."""
        return self.amount_value is not None
