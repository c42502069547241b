from datetime import datetime

import pytest

from src.worktime_stats.worktime_stats.common.datetime_utils import end_of_day, parse_iso_datetime


def test_parse_iso_datetime_accepts_local_timestamps():
    assert parse_iso_datetime("2023-10-01T08:30") == datetime(2023, 10, 1, 8, 30)
    assert parse_iso_datetime(" 2023-10-01 ") == datetime(2023, 10, 1)


@pytest.mark.parametrize("value", ["2023-10-01T00:00+00:00", "2023-10-01T08:00-05:00"])
def test_parse_iso_datetime_rejects_offsets(value):
    with pytest.raises(ValueError):
        parse_iso_datetime(value)


def test_end_of_day_is_last_whole_second():
    assert end_of_day(datetime(2023, 10, 1, 23, 0, 0, 500)) == datetime(2023, 10, 1, 23, 59, 59)
