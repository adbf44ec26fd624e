from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .common.logging_config import configure_logging
from .container import build_container
from .core.constants import CORS_HEADERS, CORS_METHODS
from .settings import AppSettings, load_settings

from .console.controller import register as register_console
from .system.controller import register as register_system

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    """Build the Flask app.

    Settings are loaded once here (``.env`` first, then the ``config.*``
    module picked by ``APP_ENV``) unless the caller injects its own.
    """
    if settings is None:
        load_dotenv(override=False)
        settings = load_settings()

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing

    container = build_container(settings=settings)
    configure_logging(app, settings, container.console_logs)

    CORS(
        app,
        origins=list(settings.cors_origins),
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        supports_credentials=False,
    )

    register_system(app, container)
    register_console(app, container)

    app.extensions["hiki_attendance"] = container

    logger.info(
        "App ready: env=%s console_user=%s cors_origins=%s",
        settings.environment,
        settings.credentials.username,
        ",".join(settings.cors_origins) or "-",
    )
    return app
