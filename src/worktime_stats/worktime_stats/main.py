from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .cli import register as register_cli
from .common.logging_utils import configure_logging
from .container import build_container
from .schedules.repository import ScheduleRepository
from .stats.controller import register as register_stats
from .stats.policy import WorkTimePolicy

logger = logging.getLogger(__name__)


def create_app(
    *,
    repository: Optional[ScheduleRepository] = None,
    policy: Optional[WorkTimePolicy] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    schedule_config = getattr(settings, "SCHEDULE_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("settings=%s schedule=%s", settings_module, schedule_config.get("path"))

    container = build_container(schedule_config=schedule_config, repository=repository, policy=policy)
    app.extensions["worktime_stats"] = container

    register_stats(app, container)
    register_cli(app, container)

    return app
