from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Shift:
    """Domain entity: one continuous work interval of one employee."""

    employee_id: str
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def is_overnight(self) -> bool:
        return self.start.date() != self.end.date()
