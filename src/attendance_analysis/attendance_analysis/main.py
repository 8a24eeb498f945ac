from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analysis.controller import register as register_analysis
from .common.logging_setup import configure_logging
from .container import Container, build_container
from .database.bootstrap import ensure_schema
from .preferences.controller import register as register_preferences

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_MB", 16)) * 1024 * 1024

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module, db_config.get("user"), db_config.get("host"),
            db_config.get("port", 3306), db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            analysis_defaults=getattr(settings, "ANALYSIS_DEFAULTS", None),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_schema(container.conn)

    register_analysis(app, container)
    register_preferences(app, container)

    return app
