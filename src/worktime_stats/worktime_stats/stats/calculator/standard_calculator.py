from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ...common.datetime_utils import end_of_day
from ...shifts.model import Shift
from ..policy import DEFAULT_POLICY, WorkTimePolicy
from .base import ShiftBucketCalculator

_ONE_SECOND = timedelta(seconds=1)


class StandardBucketCalculator(ShiftBucketCalculator):
    """Standard rule set.

    Night: flat `policy.night_credit` per overnight shift.
    Holiday: shifts starting on a holiday weekday; the part after midnight of
    the start day is not holiday time.
    """

    def __init__(self, policy: Optional[WorkTimePolicy] = None):
        self._policy = policy or DEFAULT_POLICY

    @property
    def policy(self) -> WorkTimePolicy:
        return self._policy

    def night_time(self, shift: Shift) -> timedelta:
        if shift.is_overnight:
            return self._policy.night_credit
        return timedelta(0)

    def holiday_time(self, shift: Shift) -> timedelta:
        if not self._policy.is_holiday(shift.start.weekday()):
            return timedelta(0)
        if not shift.is_overnight:
            return shift.duration
        # 23:59:59 plus one second lands exactly on midnight.
        return end_of_day(shift.start) - shift.start + _ONE_SECOND
