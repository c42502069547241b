from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from ..common.datetime_utils import parse_clock, parse_day
from ..core.constants import (
    CSV_END_SUFFIX,
    CSV_START_SUFFIX,
    DEFAULT_CSV_DATE_FORMAT,
    DEFAULT_CSV_TIME_FORMAT,
    NO_SHIFT_SENTINELS,
)
from ..core.exceptions import (
    ScheduleDateError,
    ScheduleHeaderError,
    ScheduleRecordError,
    ScheduleTimeError,
)
from ..shifts.model import Shift
from .model import Schedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class CsvScheduleRepository(ScheduleRepository):
    """Schedule stored as a CSV grid.

    Layout::

        Date,123_Start,123_End,456_Start,456_End
        2023-10-01,08:00,16:00,00:00,00:00

    One row per day, one start/end pair per employee. A pair holding the
    `00:00` sentinel means the employee has no shift that day. An end clock
    at or before the start clock is an overnight shift ending the next day.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        date_format: str = DEFAULT_CSV_DATE_FORMAT,
        time_format: str = DEFAULT_CSV_TIME_FORMAT,
    ):
        self._path = Path(path)
        self._date_format = date_format
        self._time_format = time_format

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Schedule:
        frame = self._read_frame()
        header = [str(v).strip() for v in frame.iloc[0].tolist()]
        employee_ids = self._employee_ids(header)

        shifts: list[Shift] = []
        for row_no, record in enumerate(frame.iloc[1:].itertuples(index=False, name=None), start=2):
            shifts.extend(self._parse_record(row_no, record, employee_ids))

        logger.info("Loaded %d shifts for %d employees from %s", len(shifts), len(employee_ids), self._path)
        return Schedule.of(shifts)

    def _read_frame(self) -> pd.DataFrame:
        try:
            frame = pd.read_csv(self._path, header=None, dtype=str, keep_default_na=False, skip_blank_lines=True)
        except pd.errors.EmptyDataError as e:
            raise ScheduleHeaderError(f"{self._path}: missing header row") from e
        except pd.errors.ParserError as e:
            raise ScheduleRecordError(f"{self._path}: {e}") from e
        if frame.empty:
            raise ScheduleHeaderError(f"{self._path}: missing header row")
        return frame

    @staticmethod
    def _employee_ids(header: Sequence[str]) -> list[str]:
        time_columns = header[1:]
        if not time_columns or len(time_columns) % 2:
            raise ScheduleHeaderError(
                f"expected a date column followed by start/end pairs, got {len(header)} columns"
            )

        ids: list[str] = []
        for start_col, end_col in zip(time_columns[0::2], time_columns[1::2]):
            if not start_col.endswith(CSV_START_SUFFIX):
                raise ScheduleHeaderError(f"column {start_col!r} must end with {CSV_START_SUFFIX!r}")
            employee_id = start_col[: -len(CSV_START_SUFFIX)]
            if not employee_id:
                raise ScheduleHeaderError(f"column {start_col!r} does not name an employee")
            if end_col != employee_id + CSV_END_SUFFIX:
                raise ScheduleHeaderError(f"column {end_col!r} must be {employee_id + CSV_END_SUFFIX!r}")
            ids.append(employee_id)
        return ids

    def _parse_record(self, row_no: int, record: Sequence, employee_ids: Sequence[str]) -> list[Shift]:
        values = []
        for v in record:
            if pd.isna(v) or not str(v).strip():
                raise ScheduleRecordError(f"row {row_no}: expected {len(record)} non-empty fields")
            values.append(str(v).strip())

        try:
            day = parse_day(values[0], self._date_format)
        except ValueError as e:
            raise ScheduleDateError(f"row {row_no}: invalid date {values[0]!r}") from e

        out: list[Shift] = []
        for i, employee_id in enumerate(employee_ids):
            start_raw = values[i * 2 + 1]
            end_raw = values[i * 2 + 2]
            if start_raw in NO_SHIFT_SENTINELS or end_raw in NO_SHIFT_SENTINELS:
                continue

            start = datetime.combine(day, self._clock(row_no, start_raw, "start"))
            end = datetime.combine(day, self._clock(row_no, end_raw, "end"))
            if end <= start:
                end += timedelta(hours=24)

            out.append(Shift(employee_id=employee_id, start=start, end=end))
        return out

    def _clock(self, row_no: int, raw: str, which: str):
        try:
            return parse_clock(raw, self._time_format)
        except ValueError as e:
            raise ScheduleTimeError(f"row {row_no}: invalid {which} time {raw!r}") from e
