"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Python weekday numbers (Monday == 0).
SUNDAY = 6
DEFAULT_HOLIDAY_WEEKDAYS = frozenset({SUNDAY})

# Overnight shifts are credited with a full 22:00-06:00 night.
DEFAULT_NIGHT_CREDIT_HOURS = 8

DEFAULT_CSV_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_CSV_TIME_FORMAT = "%H:%M"
CSV_START_SUFFIX = "_Start"
CSV_END_SUFFIX = "_End"

# Raw clock values meaning "no shift on this day".
NO_SHIFT_SENTINELS = frozenset({"00:00", "0:00"})
