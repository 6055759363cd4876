from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .reports.controller import register as register_reports


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).debug("settings=%s", settings_module)

    container = build_container(
        timezone=getattr(settings, "TIMEZONE", None),
        default_work_hours=getattr(settings, "DEFAULT_WORK_HOURS", None),
        sector_work_hours=getattr(settings, "SECTOR_WORK_HOURS", None),
    )

    register_reports(app, container)

    return app
