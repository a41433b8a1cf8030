"""Caller-side validators for estimation inputs.

The estimators do not validate their inputs. Callers that need an error for
bad input, or for a schedule too long to date, run these first.
"""

from datetime import date

from planrisk.estimation.constants import MAX_TOTAL_DURATION, PHASE_ALLOCATIONS
from planrisk.estimation.errors import EstimationInputError
from planrisk.estimation.types import ProjectParameters


def validate_positive_int(field: str, value: object) -> int:
    """Validate that value is a positive integer.

    bool is rejected even though it subclasses int.

    Raises:
        EstimationInputError: If value is missing, not an integer, or not positive
    """
    if value is None:
        raise EstimationInputError(field, value, "value is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise EstimationInputError(field, value, "must be an integer")
    if value <= 0:
        raise EstimationInputError(field, value, "must be greater than 0")
    return value


def validate_project_parameters(
    duration: object,
    requirement_count: object,
    developer_count: object,
) -> ProjectParameters:
    """Validate risk inputs and bundle them.

    Raises:
        EstimationInputError: On the first invalid input
    """
    return ProjectParameters(
        duration=validate_positive_int("duration", duration),
        requirement_count=validate_positive_int("requirements", requirement_count),
        developer_count=validate_positive_int("developers", developer_count),
    )


def validate_total_duration(total_duration: object, start_date: date | None = None) -> int:
    """Validate the schedule duration.

    The one-day floor and per-phase rounding can add at most one day per
    phase, so the schedule ends no later than start_date + total + phases.

    Args:
        total_duration: Requested duration in days
        start_date: Optional start; when given, the whole schedule must fit before date.max

    Raises:
        EstimationInputError: If the duration is not a positive integer, exceeds
            MAX_TOTAL_DURATION, or would run past the last representable date
    """
    value = validate_positive_int("totalDuration", total_duration)
    if value > MAX_TOTAL_DURATION:
        raise EstimationInputError(
            "totalDuration", value, f"must not exceed {MAX_TOTAL_DURATION} days"
        )
    if start_date is not None and (date.max - start_date).days < value + len(PHASE_ALLOCATIONS):
        raise EstimationInputError(
            "totalDuration", value, f"schedule starting {start_date.isoformat()} would end after {date.max.isoformat()}"
        )
    return value
