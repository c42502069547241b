from __future__ import annotations

from typing import Protocol

from .model import Schedule


class ScheduleRepository(Protocol):
    def load(self) -> Schedule:
        """Read the whole schedule.

        Raises ScheduleFormatError subclasses instead of returning a partial
        schedule.
        """

        raise NotImplementedError
