"""Schedule estimation - phase decomposition of a total duration.

Each phase of the fixed table receives max(1, round(percent / 100 * total))
days, rounded half away from zero in exact decimal arithmetic. Phases are laid
out back to back from the start date.

The sum of phase days may differ from the requested total. That difference is
reported through Schedule.total_scheduled_days and never corrected.
"""

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from loguru import logger

from planrisk.estimation.constants import PHASE_ALLOCATIONS
from planrisk.estimation.types import Phase, Schedule


def phase_day_count(allocation_percent: int, total_duration: int) -> int:
    """Days allocated to a phase, never fewer than one.

    ROUND_HALF_UP on Decimal rounds half away from zero, so 2.5 -> 3.
    """
    share = Decimal(allocation_percent) * Decimal(total_duration) / Decimal(100)
    rounded = int(share.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return max(1, rounded)


def estimate_schedule(total_duration: int, start_date: date) -> Schedule:
    """Split a total duration into the five dated project phases.

    Args:
        total_duration: Requested project duration in days
        start_date: First day of the first phase

    Returns:
        Schedule of contiguous phases in table order
    """
    phases: list[Phase] = []
    current = start_date

    for name, percent in PHASE_ALLOCATIONS:
        days = phase_day_count(percent, total_duration)
        end = current + timedelta(days=days - 1)
        phases.append(
            Phase(
                name=name,
                allocation_percent=percent,
                day_count=days,
                start_date=current,
                end_date=end,
            )
        )
        current = end + timedelta(days=1)

    schedule = Schedule(phases=tuple(phases))
    if schedule.total_scheduled_days != total_duration:
        logger.debug(
            f"Scheduled {schedule.total_scheduled_days} days for a requested duration of {total_duration}"
        )
    return schedule
