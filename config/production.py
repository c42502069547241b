from .config import Config, schedule_config

SCHEDULE_CONFIG = schedule_config(Config)

DEBUG = False

LOG_LEVEL = Config.LOG_LEVEL
