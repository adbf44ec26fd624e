from __future__ import annotations

import base64
from types import SimpleNamespace

import pytest

from hiki_attendance.main import create_app
from hiki_attendance.settings import settings_from_module


def basic_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def make_settings(**overrides):
    values = dict(
        ENVIRONMENT="testing",
        CONSOLE_USERNAME="",
        CONSOLE_PASSWORD="",
        CORS_ORIGINS="http://localhost:5173",
        HOST="127.0.0.1",
        PORT=3001,
        CONSOLE_LOG_CAPACITY=50,
        DEBUG=False,
        TESTING=True,
    )
    values.update(overrides)
    return settings_from_module(SimpleNamespace(**values))


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_auth():
    return {"Authorization": basic_header("admin", "admin123")}
