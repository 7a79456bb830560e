from __future__ import annotations

import sys
import types
from datetime import timedelta

from conftest import FakeMealAdminApi

from src.meal_admin.meal_admin.core.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SESSION_DAYS
from src.meal_admin.meal_admin.main import create_app


def test_missing_optional_settings_fall_back_to_defaults(monkeypatch):
    settings = types.ModuleType("minimal_settings")
    settings.SECRET_KEY = "test"
    settings.API_BASE_URL = "http://backend.test/api"
    settings.IMAGE_BASE_URL = "http://backend.test"
    settings.LOG_DIR = None
    monkeypatch.setitem(sys.modules, "minimal_settings", settings)

    app = create_app("minimal_settings", api=FakeMealAdminApi())

    assert app.config["SESSION_DAYS"] == DEFAULT_SESSION_DAYS
    assert app.config["REQUEST_TIMEOUT"] == DEFAULT_REQUEST_TIMEOUT
    assert app.permanent_session_lifetime == timedelta(days=DEFAULT_SESSION_DAYS)


def test_testing_settings_are_applied():
    app = create_app("config.testing", api=FakeMealAdminApi())

    assert app.config["TESTING"] is True
    assert app.config["SESSION_DAYS"] == 1
    assert app.config["API_BASE_URL"] == "http://backend.test/api"
