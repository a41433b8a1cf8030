"""Request and response schemas for the estimation endpoints.

Field names follow the JSON contract consumed by the web client: the risk
endpoint uses short lowercase names, the schedule endpoint uses camelCase.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from planrisk.estimation.constants import MAX_TOTAL_DURATION
from planrisk.estimation.types import RiskAssessment, RiskLevel, Schedule


class RiskRequest(BaseModel):
    """Request model for risk prediction."""

    duration: int = Field(..., gt=0, strict=True, description="Estimated duration in days")
    requirements: int = Field(..., gt=0, strict=True, description="Number of initial requirements")
    developers: int = Field(..., gt=0, strict=True, description="Number of developers assigned")


class RiskResponse(BaseModel):
    """Response model for risk prediction."""

    probability: float = Field(..., ge=0.0, le=1.0)
    suggestion: str
    level: RiskLevel

    @classmethod
    def from_assessment(cls, assessment: RiskAssessment) -> "RiskResponse":
        return cls(
            probability=assessment.probability,
            suggestion=assessment.recommendation,
            level=assessment.level,
        )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScheduleRequest(_CamelModel):
    """Request model for schedule estimation."""

    total_duration: int = Field(
        ..., gt=0, le=MAX_TOTAL_DURATION, strict=True, description="Requested duration in days"
    )
    start_date: date = Field(..., description="First day of the project (ISO date)")


class PhaseResponse(_CamelModel):
    name: str
    allocation_percent: int
    day_count: int
    start_date: date
    end_date: date


class ScheduleResponse(_CamelModel):
    """Response model for schedule estimation."""

    phases: list[PhaseResponse]
    overall_end_date: date
    total_scheduled_days: int

    @classmethod
    def from_schedule(cls, schedule: Schedule) -> "ScheduleResponse":
        return cls(
            phases=[
                PhaseResponse(
                    name=phase.name.value,
                    allocation_percent=phase.allocation_percent,
                    day_count=phase.day_count,
                    start_date=phase.start_date,
                    end_date=phase.end_date,
                )
                for phase in schedule.phases
            ],
            overall_end_date=schedule.overall_end_date,
            total_scheduled_days=schedule.total_scheduled_days,
        )


class ErrorResponse(BaseModel):
    """Body returned for any failed estimation."""

    error: str
