from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable

from ..core.constants import DEFAULT_HOLIDAY_WEEKDAYS, DEFAULT_NIGHT_CREDIT_HOURS
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkTimePolicy:
    """Business rules used when splitting shifts into night and holiday time.

    `holiday_weekdays` uses Python weekday numbers (Monday == 0, Sunday == 6).
    Every overnight shift is assumed to cover the whole 22:00-06:00 night and is
    credited `night_credit`, whatever its real length.
    """

    holiday_weekdays: frozenset[int] = field(default_factory=lambda: DEFAULT_HOLIDAY_WEEKDAYS)
    night_credit: timedelta = timedelta(hours=DEFAULT_NIGHT_CREDIT_HOURS)

    def __post_init__(self):
        if any(d not in range(7) for d in self.holiday_weekdays):
            raise ValidationError("holiday weekdays must be between 0 (Monday) and 6 (Sunday)")
        if self.night_credit < timedelta(0):
            raise ValidationError("night credit must not be negative")

    @classmethod
    def from_settings(cls, *, holiday_weekdays: Iterable[int], night_credit_hours: float) -> "WorkTimePolicy":
        return cls(
            holiday_weekdays=frozenset(int(d) for d in holiday_weekdays),
            night_credit=timedelta(hours=float(night_credit_hours)),
        )

    def is_holiday(self, weekday: int) -> bool:
        return weekday in self.holiday_weekdays


DEFAULT_POLICY = WorkTimePolicy()
