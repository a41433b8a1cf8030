"""Estimation module - deterministic project risk and schedule estimation.

This module provides:
- Risk probability and recommendation from duration, requirements and developers
- Phase decomposition of a total duration into dated phases
- Caller-side input validation
"""

from planrisk.estimation.errors import EstimationInputError
from planrisk.estimation.risk import (
    DEFAULT_RISK_MODEL,
    RiskModel,
    classify_risk,
    estimate_project_risk,
    estimate_risk,
)
from planrisk.estimation.schedule import estimate_schedule, phase_day_count
from planrisk.estimation.types import (
    Phase,
    PhaseName,
    ProjectParameters,
    RiskAssessment,
    RiskLevel,
    Schedule,
)
from planrisk.estimation.validators import (
    validate_positive_int,
    validate_project_parameters,
    validate_total_duration,
)

__all__ = [
    "DEFAULT_RISK_MODEL",
    "EstimationInputError",
    "Phase",
    "PhaseName",
    "ProjectParameters",
    "RiskAssessment",
    "RiskLevel",
    "RiskModel",
    "Schedule",
    "classify_risk",
    "estimate_project_risk",
    "estimate_risk",
    "estimate_schedule",
    "phase_day_count",
    "validate_positive_int",
    "validate_project_parameters",
    "validate_total_duration",
]
