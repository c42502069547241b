from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class DurationStats:
    """Result of one employee statistics query."""

    total: timedelta
    night: timedelta
    holiday: timedelta

    def to_dict(self) -> dict:
        return {
            "total_seconds": int(self.total.total_seconds()),
            "night_seconds": int(self.night.total_seconds()),
            "holiday_seconds": int(self.holiday.total_seconds()),
        }
