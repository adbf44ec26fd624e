from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import GateOutcome


@dataclass(frozen=True)
class ConsoleCredentials:
    """The single shared username/password pair guarding the console."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"ConsoleCredentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class GateDecision:
    outcome: GateOutcome
    message: Optional[str] = None

    @property
    def admitted(self) -> bool:
        return self.outcome is GateOutcome.ADMIT


@dataclass(frozen=True)
class ConsoleLogEntry:
    timestamp: datetime
    level: str
    logger: str
    message: str

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level,
            "logger": self.logger,
            "message": self.message,
        }
