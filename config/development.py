import os

from .config import Config, schedule_config

SCHEDULE_CONFIG = schedule_config(Config)

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
