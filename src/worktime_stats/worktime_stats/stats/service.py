from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import earliest, latest
from ..common.validators import require_non_empty, require_ordered_range
from ..core.exceptions import NoMatchingShiftsError, ValidationError
from ..schedules.model import Schedule
from ..shifts.model import Shift
from .calculator.base import ShiftBucketCalculator
from .calculator.standard_calculator import StandardBucketCalculator
from .model import DurationStats

logger = logging.getLogger(__name__)


class WorkTimeStatsService:
    def __init__(self, *, calculator: Optional[ShiftBucketCalculator] = None):
        self._calculator = calculator or StandardBucketCalculator()

    def employee_stats(self, schedule: Schedule, employee_id: str) -> DurationStats:
        """Total, night and holiday time of one employee.

        The three buckets are accumulated independently in a single pass, so
        one shift may count towards all of them.
        """
        require_non_empty(employee_id, "employee id")

        total = night = holiday = timedelta(0)
        for shift in schedule.for_employee(employee_id):
            total += shift.duration
            night += self._calculator.night_time(shift)
            holiday += self._calculator.holiday_time(shift)

        if not total:
            raise NoMatchingShiftsError(f"no shifts for employee {employee_id}")

        logger.debug("Stats for %s: total=%s night=%s holiday=%s", employee_id, total, night, holiday)
        return DurationStats(total=total, night=night, holiday=holiday)

    def work_time_in_range(
        self,
        schedule: Schedule,
        from_instant: datetime,
        to_instant: datetime,
        employee_id: str,
    ) -> timedelta:
        """Time worked by `employee_id` inside the window.

        Shifts merely touching a window edge do not count. An employee with
        no overlapping shifts gets zero rather than an error.
        """
        require_ordered_range(from_instant, to_instant)

        total = timedelta(0)
        for shift in schedule.for_employee(employee_id):
            if shift.start < to_instant and shift.end > from_instant:
                total += earliest(shift.end, to_instant) - latest(shift.start, from_instant)
        return total


def time_diff_between_shifts(first: Optional[Shift], second: Optional[Shift]) -> timedelta:
    """Span from the start of `first` to the end of `second`."""
    if first is None or second is None:
        raise ValidationError("cannot compute time difference for a missing shift")
    if first.end < first.start or second.end < second.start:
        raise ValidationError("shift ends before it starts")
    return second.end - first.start
