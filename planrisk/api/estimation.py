"""API endpoints for risk and schedule estimation.

Thin transport adapters: parse the JSON body, run the pure estimator, shape
the JSON response. Nothing is persisted here.
"""

from fastapi import APIRouter, Depends
from loguru import logger

from planrisk.api.schemas import (
    ErrorResponse,
    RiskRequest,
    RiskResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from planrisk.config.settings import settings
from planrisk.estimation.risk import RiskModel, estimate_project_risk
from planrisk.estimation.schedule import estimate_schedule
from planrisk.estimation.validators import validate_project_parameters, validate_total_duration

router = APIRouter(tags=["estimation"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed or missing input"},
    500: {"model": ErrorResponse, "description": "Internal failure"},
}


def get_risk_model() -> RiskModel:
    """Risk rule built from the current settings."""
    return settings.risk_model()


@router.post("/predict-risk", response_model=RiskResponse, responses=_ERROR_RESPONSES)
def predict_risk(
    request: RiskRequest,
    model: RiskModel = Depends(get_risk_model),
) -> RiskResponse:
    """Predict project risk from duration, requirements and developers.

    Returns:
        Probability in [0, 1], the matching suggestion and the risk level
    """
    logger.info(
        f"Predicting risk for: duration={request.duration} "
        f"requirements={request.requirements} developers={request.developers}"
    )
    parameters = validate_project_parameters(
        request.duration,
        request.requirements,
        request.developers,
    )
    assessment = estimate_project_risk(parameters, model)
    logger.info(f"Risk prediction result: probability={assessment.probability} level={assessment.level}")
    return RiskResponse.from_assessment(assessment)


@router.post("/estimate-schedule", response_model=ScheduleResponse, responses=_ERROR_RESPONSES)
def estimate_project_schedule(request: ScheduleRequest) -> ScheduleResponse:
    """Split a total duration into dated project phases.

    totalScheduledDays may differ from totalDuration due to per-phase rounding.
    """
    logger.info(f"Estimating schedule: total_duration={request.total_duration} start_date={request.start_date}")
    total_duration = validate_total_duration(request.total_duration, request.start_date)
    schedule = estimate_schedule(total_duration, request.start_date)
    logger.info(
        f"Schedule estimated: {schedule.total_scheduled_days} days, "
        f"{schedule.start_date} to {schedule.overall_end_date}"
    )
    return ScheduleResponse.from_schedule(schedule)
