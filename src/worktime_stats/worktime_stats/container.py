from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from .core.constants import (
    DEFAULT_CSV_DATE_FORMAT,
    DEFAULT_CSV_TIME_FORMAT,
    DEFAULT_HOLIDAY_WEEKDAYS,
    DEFAULT_NIGHT_CREDIT_HOURS,
)
from .reporting.service import StatsReportService
from .schedules.csv_schedule_repository import CsvScheduleRepository
from .schedules.model import Schedule
from .schedules.repository import ScheduleRepository
from .stats.calculator.standard_calculator import StandardBucketCalculator
from .stats.policy import WorkTimePolicy
from .stats.service import WorkTimeStatsService


@dataclass(frozen=True)
class Container:
    schedule_repo: ScheduleRepository
    policy: WorkTimePolicy

    stats_service: WorkTimeStatsService
    report_service: StatsReportService

    @cached_property
    def schedule(self) -> Schedule:
        """Schedule read on first use and kept read-only afterwards."""
        return self.schedule_repo.load()


def build_container(
    *,
    schedule_config: dict,
    repository: Optional[ScheduleRepository] = None,
    policy: Optional[WorkTimePolicy] = None,
) -> Container:
    if repository is None:
        repository = CsvScheduleRepository(
            str(schedule_config["path"]),
            date_format=str(schedule_config.get("date_format", DEFAULT_CSV_DATE_FORMAT)),
            time_format=str(schedule_config.get("time_format", DEFAULT_CSV_TIME_FORMAT)),
        )
    if policy is None:
        policy = WorkTimePolicy.from_settings(
            holiday_weekdays=schedule_config.get("holiday_weekdays", DEFAULT_HOLIDAY_WEEKDAYS),
            night_credit_hours=schedule_config.get("night_credit_hours", DEFAULT_NIGHT_CREDIT_HOURS),
        )

    stats_service = WorkTimeStatsService(calculator=StandardBucketCalculator(policy))
    report_service = StatsReportService(stats_service=stats_service)

    return Container(
        schedule_repo=repository,
        policy=policy,
        stats_service=stats_service,
        report_service=report_service,
    )
