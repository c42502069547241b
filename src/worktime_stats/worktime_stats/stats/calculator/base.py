from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta

from ...shifts.model import Shift


class ShiftBucketCalculator(ABC):
    """Calculator interface (Strategy Pattern for night/holiday attribution)."""

    @abstractmethod
    def night_time(self, shift: Shift) -> timedelta:
        raise NotImplementedError

    @abstractmethod
    def holiday_time(self, shift: Shift) -> timedelta:
        raise NotImplementedError
