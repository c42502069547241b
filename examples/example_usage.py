"""Example: use the service layer directly (no Flask).

Run from the repository root: python examples/example_usage.py
"""

from datetime import datetime

from src.worktime_stats.worktime_stats.reporting.formatting import format_duration, format_stats
from src.worktime_stats.worktime_stats.schedules.csv_schedule_repository import CsvScheduleRepository
from src.worktime_stats.worktime_stats.stats.service import WorkTimeStatsService


def main():
    schedule = CsvScheduleRepository("examples/data.csv").load()
    service = WorkTimeStatsService()

    print(format_stats("123", service.employee_stats(schedule, "123")))

    worked = service.work_time_in_range(schedule, datetime(2023, 10, 1), datetime(2023, 10, 2, 23, 59), "123")
    print(f"Work time of employee 123 in range: {format_duration(worked)}")


if __name__ == "__main__":
    main()
