"""Estimation data models.

Immutable value types passed into and returned by the estimators.
None of them is persisted here; storing results is the caller's job.
"""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Literal

RiskLevel = Literal["Low", "Medium", "High"]


class PhaseName(StrEnum):
    PLANNING = "Planning"
    DESIGN = "Design"
    DEVELOPMENT = "Development"
    TESTING = "Testing"
    DEPLOYMENT = "Deployment"


@dataclass(frozen=True)
class ProjectParameters:
    """Sizing inputs for a single risk estimation.

    Attributes:
        duration: Estimated project duration in days
        requirement_count: Number of initial requirements
        developer_count: Number of developers assigned
    """

    duration: int
    requirement_count: int
    developer_count: int


@dataclass(frozen=True)
class RiskAssessment:
    """Result of a risk estimation.

    Attributes:
        probability: Risk probability in [0, 1]
        level: Band the probability falls in
        recommendation: Message matching the band
    """

    probability: float
    level: RiskLevel
    recommendation: str


@dataclass(frozen=True)
class Phase:
    """A dated project phase. Both dates are inclusive."""

    name: PhaseName
    allocation_percent: int
    day_count: int
    start_date: date
    end_date: date


@dataclass(frozen=True)
class Schedule:
    """Ordered, contiguous phases covering a project.

    total_scheduled_days may differ from the requested duration because of
    per-phase rounding and the one-day floor.
    """

    phases: tuple[Phase, ...]

    @property
    def overall_end_date(self) -> date:
        return self.phases[-1].end_date

    @property
    def start_date(self) -> date:
        return self.phases[0].start_date

    @property
    def total_scheduled_days(self) -> int:
        return sum(phase.day_count for phase in self.phases)
