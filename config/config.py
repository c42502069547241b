import os

from . import parse_weekdays


class Config:
    SCHEDULE_CSV = os.environ.get("SCHEDULE_CSV", "examples/data.csv")
    CSV_DATE_FORMAT = os.environ.get("CSV_DATE_FORMAT", "%Y-%m-%d")
    CSV_TIME_FORMAT = os.environ.get("CSV_TIME_FORMAT", "%H:%M")

    # Work-time rules
    HOLIDAY_WEEKDAYS = parse_weekdays(os.environ.get("HOLIDAY_WEEKDAYS", "6"))
    NIGHT_CREDIT_HOURS = float(os.environ.get("NIGHT_CREDIT_HOURS", "8"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def schedule_config(cfg=Config) -> dict:
    return {
        "path": cfg.SCHEDULE_CSV,
        "date_format": cfg.CSV_DATE_FORMAT,
        "time_format": cfg.CSV_TIME_FORMAT,
        "holiday_weekdays": cfg.HOLIDAY_WEEKDAYS,
        "night_credit_hours": cfg.NIGHT_CREDIT_HOURS,
    }
