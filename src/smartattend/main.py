from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container, build_gateway, build_store, store_backend
from .database.bootstrap import apply_schema, list_tables

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .batches.controller import register as register_batches
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("settings=%s store=%s", settings_module, getattr(settings, "STORE_BACKEND", "memory"))

    if container is None:
        if store_backend(settings) == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
            db_config = getattr(settings, "DB_CONFIG")
            apply_schema(db_config)
            logger.debug("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            store=build_store(settings),
            gateway=build_gateway(settings),
            at_risk_threshold=float(getattr(settings, "AT_RISK_THRESHOLD", 75)),
        )

        if getattr(settings, "AUTO_SEED_DB", False):
            seeded = container.batch_service.seed_demo_batches()
            logger.info("demo seed ready (%d batches created)", len(seeded))

    app.extensions["smartattend"] = container

    register_batches(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_analytics(app, container)

    return app
