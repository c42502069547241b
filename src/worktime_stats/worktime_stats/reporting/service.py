from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.exceptions import NoMatchingShiftsError
from ..schedules.model import Schedule
from ..stats.service import WorkTimeStatsService
from .formatting import format_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    skipped: list[str] = field(default_factory=list)


class StatsReportService:
    def __init__(self, *, stats_service: Optional[WorkTimeStatsService] = None):
        self._stats = stats_service or WorkTimeStatsService()

    def build_report(self, schedule: Schedule) -> ReportData:
        rows: list[dict] = []
        skipped: list[str] = []

        for employee_id in schedule.employee_ids():
            try:
                stats = self._stats.employee_stats(schedule, employee_id)
            except NoMatchingShiftsError:
                skipped.append(employee_id)
                continue

            rows.append(
                {
                    "employee_id": employee_id,
                    "shifts": sum(1 for _ in schedule.for_employee(employee_id)),
                    "total": format_duration(stats.total),
                    "night": format_duration(stats.night),
                    "holiday": format_duration(stats.holiday),
                    **stats.to_dict(),
                }
            )

        rows.sort(key=lambda r: r["total_seconds"], reverse=True)
        logger.info("Built report for %d employees (%d skipped)", len(rows), len(skipped))
        return ReportData(rows=rows, skipped=skipped)
