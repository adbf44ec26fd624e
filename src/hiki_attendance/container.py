from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .console.gate import ConsoleAuthGate
from .console.log_buffer import ConsoleLogBuffer
from .settings import AppSettings


@dataclass(frozen=True)
class Container:
    settings: AppSettings

    console_gate: ConsoleAuthGate
    console_logs: ConsoleLogBuffer

    started_at: datetime


def build_container(*, settings: AppSettings) -> Container:
    console_gate = ConsoleAuthGate(settings.credentials)
    console_logs = ConsoleLogBuffer(settings.console_log_capacity)

    return Container(
        settings=settings,
        console_gate=console_gate,
        console_logs=console_logs,
        started_at=datetime.now(timezone.utc),
    )
