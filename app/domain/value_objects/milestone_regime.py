"""Purchase-horizon regimes that decide roadmap density."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


@dataclass(frozen=True)
class MilestoneTemplate:
    """Base roadmap milestone before amounts and statuses are derived."""

    title: str
    percent: Optional[int] = None
    amount_label: Optional[str] = None  # time-based milestones, e.g. "first month"
    status: str = "upcoming"


@dataclass(frozen=True)
class ExtraCheckpoints:
    """Percentage checkpoints emitted right after the base milestone `after`."""

    after: str
    title: str
    percents: tuple[int, ...]


FIRST_MONTH = "Tháng đầu tiên"
SECOND_MONTH = "Tháng thứ hai"

BASE_MILESTONES: tuple[MilestoneTemplate, ...] = (
    MilestoneTemplate(title="Goal 1", amount_label=FIRST_MONTH, status="done"),
    MilestoneTemplate(title="Goal 2", amount_label=SECOND_MONTH, status="done"),
    MilestoneTemplate(title="Goal 4", percent=50),
    MilestoneTemplate(title="Goal 5", percent=80),
    MilestoneTemplate(title="Goal 6", percent=100),
)


@dataclass(frozen=True)
class UnderOneYear:
    """Purchase less than a year away: few, wide checkpoints."""

    name: ClassVar[str] = "under1"
    base: ClassVar[tuple[MilestoneTemplate, ...]] = BASE_MILESTONES
    extras: ClassVar[tuple[ExtraCheckpoints, ...]] = (
        ExtraCheckpoints(after="Goal 2", title="Goal 3", percents=(25,)),
    )


@dataclass(frozen=True)
class OneToTwoYears:
    """Purchase one to two years away."""

    name: ClassVar[str] = "under2"
    base: ClassVar[tuple[MilestoneTemplate, ...]] = BASE_MILESTONES
    extras: ClassVar[tuple[ExtraCheckpoints, ...]] = (
        ExtraCheckpoints(after="Goal 2", title="Goal 3", percents=(20,)),
        ExtraCheckpoints(after="Goal 4", title="Goal 4", percents=(35, 50)),
        ExtraCheckpoints(after="Goal 5", title="Goal 5", percents=(65, 80)),
    )


@dataclass(frozen=True)
class OverTwoYears:
    """Purchase more than two years away: dense checkpoints."""

    name: ClassVar[str] = "over2"
    base: ClassVar[tuple[MilestoneTemplate, ...]] = BASE_MILESTONES
    extras: ClassVar[tuple[ExtraCheckpoints, ...]] = (
        ExtraCheckpoints(after="Goal 2", title="Goal 3", percents=(15,)),
        ExtraCheckpoints(after="Goal 4", title="Goal 4", percents=(30, 40, 50, 60)),
        ExtraCheckpoints(after="Goal 5", title="Goal 5", percents=(70, 80, 90)),
    )


MilestoneRegime = Union[UnderOneYear, OneToTwoYears, OverTwoYears]


def regime_for_duration(duration_years: float) -> MilestoneRegime:
    """
    Select the regime for the years between plan start and purchase.

    Args:
        duration_years: Purchase year minus start year (fractions allowed)

    Returns:
        UnderOneYear below 1, OneToTwoYears below 2, OverTwoYears otherwise
    """
    if duration_years < 1:
        return UnderOneYear()
    if duration_years < 2:
        return OneToTwoYears()
    return OverTwoYears()
