from __future__ import annotations

from enum import Enum


class GateOutcome(str, Enum):
    """Result of running a request through the console auth gate."""

    ADMIT = "ADMIT"
    CHALLENGE = "CHALLENGE"
    FAULT = "FAULT"
