from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType
from typing import Optional, Tuple

from config import get_settings_module

from .console.model import ConsoleCredentials
from .core import constants


@dataclass(frozen=True)
class AppSettings:
    """Process-wide configuration, read once at startup and never mutated."""

    environment: str
    credentials: ConsoleCredentials
    cors_origins: Tuple[str, ...]
    host: str
    port: int
    console_log_capacity: int
    debug: bool = False
    testing: bool = False


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(o.strip() for o in (raw or "").split(",") if o.strip())


def settings_from_module(settings: ModuleType) -> AppSettings:
    # `or` keeps empty-string overrides on the defaults
    username = getattr(settings, "CONSOLE_USERNAME", "") or constants.DEFAULT_CONSOLE_USERNAME
    password = getattr(settings, "CONSOLE_PASSWORD", "") or constants.DEFAULT_CONSOLE_PASSWORD

    capacity = int(getattr(settings, "CONSOLE_LOG_CAPACITY", constants.DEFAULT_CONSOLE_LOG_CAPACITY))
    if capacity < 1:
        capacity = constants.DEFAULT_CONSOLE_LOG_CAPACITY

    return AppSettings(
        environment=str(getattr(settings, "ENVIRONMENT", "development")),
        credentials=ConsoleCredentials(username=str(username), password=str(password)),
        cors_origins=_split_origins(getattr(settings, "CORS_ORIGINS", constants.DEFAULT_CORS_ORIGINS)),
        host=str(getattr(settings, "HOST", constants.DEFAULT_HOST)),
        port=int(getattr(settings, "PORT", constants.DEFAULT_PORT)),
        console_log_capacity=capacity,
        debug=bool(getattr(settings, "DEBUG", False)),
        testing=bool(getattr(settings, "TESTING", False)),
    )


def load_settings(settings_module: Optional[str] = None) -> AppSettings:
    """Import the selected ``config.*`` module and fold it into :class:`AppSettings`."""
    module = importlib.import_module(settings_module or get_settings_module())
    return settings_from_module(module)
