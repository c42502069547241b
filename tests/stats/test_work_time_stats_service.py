from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.worktime_stats.worktime_stats.core.exceptions import NoMatchingShiftsError, ValidationError
from src.worktime_stats.worktime_stats.schedules.model import Schedule
from src.worktime_stats.worktime_stats.shifts.model import Shift
from src.worktime_stats.worktime_stats.stats.service import WorkTimeStatsService, time_diff_between_shifts


def _shift(employee_id: str, start: datetime, end: datetime) -> Shift:
    return Shift(employee_id=employee_id, start=start, end=end)


@pytest.fixture
def schedule() -> Schedule:
    return Schedule.of(
        [
            # 2023-10-01 is a Sunday
            _shift("123", datetime(2023, 10, 1, 8, 0), datetime(2023, 10, 1, 16, 0)),
            _shift("123", datetime(2023, 10, 2, 8, 0), datetime(2023, 10, 2, 16, 0)),
            _shift("123", datetime(2023, 10, 3, 19, 0), datetime(2023, 10, 4, 7, 0)),
            _shift("123", datetime(2023, 10, 8, 20, 0), datetime(2023, 10, 9, 6, 0)),
            _shift("456", datetime(2023, 10, 1, 16, 0), datetime(2023, 10, 2, 0, 0)),
        ]
    )


def test_employee_stats_sums_all_buckets(schedule):
    stats = WorkTimeStatsService().employee_stats(schedule, "123")

    assert stats.total == timedelta(hours=38)
    assert stats.night == timedelta(hours=16)
    # full Sunday day shift + Sunday 20:00 until midnight
    assert stats.holiday == timedelta(hours=12)


def test_total_is_exact_sum_of_matching_shift_durations(schedule):
    stats = WorkTimeStatsService().employee_stats(schedule, "123")

    expected = sum((s.end - s.start for s in schedule if s.employee_id == "123"), timedelta(0))
    assert stats.total == expected


def test_overnight_shift_gets_flat_night_credit():
    schedule = Schedule.of([_shift("123", datetime(2023, 10, 3, 19, 0), datetime(2023, 10, 4, 7, 0))])

    stats = WorkTimeStatsService().employee_stats(schedule, "123")

    assert stats.total == timedelta(hours=12)
    assert stats.night == timedelta(hours=8)
    assert stats.holiday == timedelta(0)


def test_sunday_day_shift_is_fully_holiday():
    schedule = Schedule.of([_shift("123", datetime(2023, 10, 1, 8, 0), datetime(2023, 10, 1, 16, 0))])

    stats = WorkTimeStatsService().employee_stats(schedule, "123")

    assert stats.holiday == timedelta(hours=8)
    assert stats.night == timedelta(0)


def test_sunday_to_monday_shift_counts_holiday_until_midnight():
    schedule = Schedule.of([_shift("123", datetime(2023, 10, 1, 23, 0), datetime(2023, 10, 2, 7, 0))])

    stats = WorkTimeStatsService().employee_stats(schedule, "123")

    assert stats.total == timedelta(hours=8)
    assert stats.holiday == timedelta(hours=1)
    assert stats.night == timedelta(hours=8)


def test_saturday_to_sunday_shift_is_not_holiday():
    schedule = Schedule.of([_shift("123", datetime(2023, 9, 30, 22, 0), datetime(2023, 10, 1, 6, 0))])

    stats = WorkTimeStatsService().employee_stats(schedule, "123")

    assert stats.holiday == timedelta(0)


def test_employee_stats_unknown_employee_raises(schedule):
    with pytest.raises(NoMatchingShiftsError):
        WorkTimeStatsService().employee_stats(schedule, "nonexistent")


def test_employee_stats_rejects_empty_id(schedule):
    with pytest.raises(ValidationError):
        WorkTimeStatsService().employee_stats(schedule, "")


def test_employee_stats_blank_id_has_no_shifts(schedule):
    with pytest.raises(NoMatchingShiftsError):
        WorkTimeStatsService().employee_stats(schedule, "   ")


def test_work_time_in_range_excludes_shift_outside_half_open_window(schedule):
    worked = WorkTimeStatsService().work_time_in_range(
        schedule, datetime(2023, 10, 1, 0, 0), datetime(2023, 10, 2, 0, 0), "123"
    )

    assert worked == timedelta(hours=8)


def test_work_time_in_range_clips_overnight_shift(schedule):
    worked = WorkTimeStatsService().work_time_in_range(
        schedule, datetime(2023, 10, 3, 22, 0), datetime(2023, 10, 4, 2, 0), "123"
    )

    assert worked == timedelta(hours=4)


def test_work_time_in_range_shift_touching_window_is_excluded(schedule):
    worked = WorkTimeStatsService().work_time_in_range(
        schedule, datetime(2023, 10, 1, 16, 0), datetime(2023, 10, 1, 20, 0), "123"
    )

    assert worked == timedelta(0)


def test_work_time_in_range_degenerate_window_is_zero(schedule):
    moment = datetime(2023, 10, 1, 10, 0)

    assert WorkTimeStatsService().work_time_in_range(schedule, moment, moment, "123") == timedelta(0)


def test_work_time_in_range_unknown_employee_is_zero(schedule):
    worked = WorkTimeStatsService().work_time_in_range(
        schedule, datetime(2023, 10, 1), datetime(2023, 10, 31), "nonexistent"
    )

    assert worked == timedelta(0)


def test_work_time_in_range_is_repeatable(schedule):
    svc = WorkTimeStatsService()
    args = (schedule, datetime(2023, 10, 1), datetime(2023, 10, 9), "123")

    assert svc.work_time_in_range(*args) == svc.work_time_in_range(*args) == timedelta(hours=32)


def test_work_time_in_range_rejects_inverted_window(schedule):
    with pytest.raises(ValidationError):
        WorkTimeStatsService().work_time_in_range(
            schedule, datetime(2023, 10, 2), datetime(2023, 10, 1), "123"
        )


def test_time_diff_spans_start_of_first_to_end_of_second():
    first = _shift("123", datetime(2023, 10, 1, 8, 0), datetime(2023, 10, 1, 16, 0))
    second = _shift("456", datetime(2023, 10, 1, 16, 0), datetime(2023, 10, 2, 0, 0))

    assert time_diff_between_shifts(first, second) == timedelta(hours=16)


@pytest.mark.parametrize("first_missing", [True, False])
def test_time_diff_rejects_missing_shift(first_missing):
    shift = _shift("123", datetime(2023, 10, 1, 8, 0), datetime(2023, 10, 1, 16, 0))

    with pytest.raises(ValidationError):
        if first_missing:
            time_diff_between_shifts(None, shift)
        else:
            time_diff_between_shifts(shift, None)


def test_time_diff_rejects_inverted_shift():
    good = _shift("123", datetime(2023, 10, 1, 8, 0), datetime(2023, 10, 1, 16, 0))
    broken = _shift("123", datetime(2023, 10, 2, 16, 0), datetime(2023, 10, 2, 8, 0))

    with pytest.raises(ValidationError):
        time_diff_between_shifts(good, broken)
