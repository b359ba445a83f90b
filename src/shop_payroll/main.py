from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .advances.controller import register as register_advances
from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema
from .payroll.controller import register as register_payroll
from .settings import get_settings_module
from .staff.controller import register as register_staff

log = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.info("[shop-payroll] settings=%s", settings_module)

    if container is None:
        container = build_container(
            db_config=getattr(settings, "DB_CONFIG"),
            hra_policy=getattr(settings, "HRA_POLICY", "full"),
            rates=getattr(settings, "PART_TIME_RATES", None),
        )
        log.info("[shop-payroll] db=%s", container.conn.config.describe())
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(container.conn)

    register_error_handlers(app)
    register_staff(app, container)
    register_attendance(app, container)
    register_advances(app, container)
    register_payroll(app, container)

    return app
