"""HTTP Basic Auth gate for the console routes.

The gate is built once with the configured credential pair and placed in
front of the console UI and console API by the routing layer. Each request
ends in exactly one of three outcomes:

- Admit: the wrapped handler runs, the gate adds nothing to the response.
- Challenge: 401 with ``WWW-Authenticate: Basic realm="..."`` so browsers show
  their native login dialog, and ``{"error": <reason>}``.
- Fault: 500 ``{"error": "Authentication error"}`` when the token is not
  valid base64 or the payload is not UTF-8.
"""

from __future__ import annotations

import base64
import logging
import secrets
from functools import wraps
from typing import Optional, Tuple

from flask import Response, jsonify, request

from ..core.constants import CONSOLE_REALM
from ..core.enums import GateOutcome
from ..core.exceptions import CredentialDecodeError
from .model import ConsoleCredentials, GateDecision

logger = logging.getLogger(__name__)

BASIC_PREFIX = "Basic "

MSG_HEADER_REQUIRED = "Authorization header is required"
MSG_BASIC_REQUIRED = "Basic authentication is required"
MSG_INVALID_CREDENTIALS = "Invalid credentials"
MSG_AUTH_ERROR = "Authentication error"


def decode_basic_credentials(token: str) -> Tuple[str, Optional[str]]:
    """Decode a Basic token into ``(username, password)``.

    The payload is split on the first ``:`` only, so passwords may contain
    colons. ``password`` is ``None`` when the payload has no colon at all.
    Raises :class:`CredentialDecodeError` for invalid base64 or UTF-8.
    """
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except ValueError as exc:
        # binascii.Error and UnicodeDecodeError are both ValueError
        raise CredentialDecodeError(str(exc)) from exc

    username, sep, password = decoded.partition(":")
    return username, (password if sep else None)


def _same(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


class ConsoleAuthGate:
    def __init__(self, credentials: ConsoleCredentials, *, realm: str = CONSOLE_REALM):
        self._credentials = credentials
        self._realm = realm

    @property
    def challenge_header(self) -> str:
        return f'Basic realm="{self._realm}"'

    def evaluate(self, header: Optional[str]) -> GateDecision:
        if not header:
            return GateDecision(GateOutcome.CHALLENGE, MSG_HEADER_REQUIRED)
        if not header.startswith(BASIC_PREFIX):
            return GateDecision(GateOutcome.CHALLENGE, MSG_BASIC_REQUIRED)

        token = header.split(" ")[1]
        try:
            username, password = decode_basic_credentials(token)
        except CredentialDecodeError:
            return GateDecision(GateOutcome.FAULT, MSG_AUTH_ERROR)

        if password is None:
            return GateDecision(GateOutcome.CHALLENGE, MSG_INVALID_CREDENTIALS)

        user_ok = _same(username, self._credentials.username)
        password_ok = _same(password, self._credentials.password)
        if user_ok and password_ok:
            return GateDecision(GateOutcome.ADMIT)
        return GateDecision(GateOutcome.CHALLENGE, MSG_INVALID_CREDENTIALS)

    def response_for(self, decision: GateDecision) -> Optional[Response]:
        """Turn a decision into the terminating response, or ``None`` on Admit."""
        if decision.admitted:
            return None

        resp = jsonify({"error": decision.message})
        if decision.outcome is GateOutcome.FAULT:
            resp.status_code = 500
            return resp

        resp.status_code = 401
        resp.headers["WWW-Authenticate"] = self.challenge_header
        return resp

    def check_request(self) -> Optional[Response]:
        """``before_request`` hook: evaluate the current Flask request."""
        decision = self.evaluate(request.headers.get("Authorization"))
        if decision.outcome is GateOutcome.CHALLENGE:
            logger.info(
                "Console auth challenge: %s",
                decision.message,
                extra={"method": request.method, "path": request.path, "remote_addr": request.remote_addr},
            )
        elif decision.outcome is GateOutcome.FAULT:
            logger.warning(
                "Console auth fault: undecodable Basic credential",
                extra={"method": request.method, "path": request.path, "remote_addr": request.remote_addr},
            )
        return self.response_for(decision)

    def protect(self, view):
        """Decorator form of :meth:`check_request` for a single view."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            denied = self.check_request()
            if denied is not None:
                return denied
            return view(*args, **kwargs)

        return wrapper
