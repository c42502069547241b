import os

from .config import Config, schedule_config

SCHEDULE_CONFIG = {
    **schedule_config(Config),
    "path": os.getenv("SCHEDULE_CSV", "tests/data/schedule.csv"),
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
