from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.responses import register_error_handlers
from .container import build_container
from .core.logging import get_logger, setup_logging
from .database.bootstrap import ensure_indexes, seed_demo_data
from .database.record_store import RecordStore
from .attendance.controller import register as register_attendance
from .billing.controller import register as register_billing
from .classes.controller import register as register_classes
from .dashboard.controller import register as register_dashboard
from .students.controller import register as register_students

logger = get_logger(__name__)


def create_app(*, store: Optional[RecordStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    setup_logging(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        fmt=str(getattr(settings, "LOG_FORMAT", "json")),
    )

    store_config = dict(getattr(settings, "STORE_CONFIG"))
    logger.info(
        "starting engclass",
        extra={
            "settings": settings_module,
            "store_backend": store_config.get("backend"),
            "store_database": store_config.get("database"),
        },
    )

    container = build_container(
        store_config=store_config,
        payment_config=dict(getattr(settings, "PAYMENT_CONFIG", {})),
        default_fee=int(getattr(settings, "DEFAULT_STUDENT_FEE", 150000)),
        reject_duplicate_sessions=bool(getattr(settings, "REJECT_DUPLICATE_SESSIONS", False)),
        store=store,
    )
    app.extensions["engclass"] = container

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        ensure_indexes(container.conn.database())
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(container.store)

    register_error_handlers(app)
    register_dashboard(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_billing(app, container)

    return app
