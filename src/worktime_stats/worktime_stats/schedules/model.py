from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..shifts.model import Shift


@dataclass(frozen=True)
class Schedule:
    """Ordered, read-only collection of shifts.

    Insertion order is kept; several shifts per employee and day are allowed
    and are neither deduplicated nor checked for overlap.
    """

    shifts: tuple[Shift, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, shifts: Iterable[Shift]) -> "Schedule":
        return cls(shifts=tuple(shifts))

    def __iter__(self) -> Iterator[Shift]:
        return iter(self.shifts)

    def __len__(self) -> int:
        return len(self.shifts)

    def for_employee(self, employee_id: str) -> Iterator[Shift]:
        return (s for s in self.shifts if s.employee_id == employee_id)

    def employee_ids(self) -> list[str]:
        return list(dict.fromkeys(s.employee_id for s in self.shifts))
