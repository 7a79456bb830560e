from __future__ import annotations

import importlib
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.base import MealAdminApi
from .common.logger import get_logger, setup_logging
from .container import build_container
from .core.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SESSION_DAYS
from .employees.controller import register as register_employees
from .meal_requests.controller import register as register_meal_requests
from .ui.controller import register as register_ui
from .users.controller import register as register_users

logger = get_logger(__name__)


def create_app(settings_module: Optional[str] = None, *, api: Optional[MealAdminApi] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_BASE_URL"] = getattr(settings, "API_BASE_URL")
    app.config["IMAGE_BASE_URL"] = getattr(settings, "IMAGE_BASE_URL")
    app.config["REQUEST_TIMEOUT"] = float(getattr(settings, "REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_DIR", None))
    logger.info("Starting Meal Admin Dashboard (settings=%s)", settings_module)
    logger.info("Backend API: %s", app.config["API_BASE_URL"])

    container = build_container(
        api_base_url=app.config["API_BASE_URL"],
        image_base_url=app.config["IMAGE_BASE_URL"],
        timeout=app.config["REQUEST_TIMEOUT"],
        api=api,
    )

    register_ui(app, container)
    register_users(app, container)
    register_meal_requests(app, container)
    register_employees(app, container)

    return app
