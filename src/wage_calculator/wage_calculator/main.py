from __future__ import annotations

import importlib
import logging.config

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.validators import require_non_negative
from .container import build_container
from .payroll.controller import register as register_payroll


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = require_non_negative(
        getattr(settings, "MAX_UPLOAD_BYTES", 16 * 1024 * 1024), "Upload limit"
    )

    logging_settings = getattr(settings, "LOGGING", None)
    if logging_settings:
        logging.config.dictConfig(logging_settings)

    container = build_container(settings=settings)

    register_payroll(app, container)

    return app
