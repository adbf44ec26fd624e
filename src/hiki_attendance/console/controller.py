from __future__ import annotations

import logging
from datetime import datetime, timezone

from flask import Blueprint, Flask, jsonify, render_template, request

from ..container import Container
from ..core.constants import DEFAULT_CONSOLE_LOG_LIMIT
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

CONSOLE_API_PREFIX = "/api/console"


def _parse_limit(raw, *, capacity: int) -> int:
    if raw is None or raw == "":
        return min(DEFAULT_CONSOLE_LOG_LIMIT, capacity)
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError("limit must be an integer")
    return max(1, min(value, capacity))


def register(app: Flask, container: Container) -> None:
    gate = container.console_gate
    logs = container.console_logs

    @app.route("/console", endpoint="console")
    @gate.protect
    def console():
        return render_template("console.html", environment=container.settings.environment)

    api = Blueprint("console_api", __name__, url_prefix=CONSOLE_API_PREFIX)

    # App-level so unknown paths and wrong methods under the prefix are challenged too
    @app.before_request
    def _require_console_auth():
        path = request.path
        if path != CONSOLE_API_PREFIX and not path.startswith(CONSOLE_API_PREFIX + "/"):
            return None
        # CORS preflight carries no credentials; flask-cors answers it
        if request.method == "OPTIONS":
            return None
        return gate.check_request()

    @api.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @api.route("/status", methods=["GET"], endpoint="status")
    def status():
        uptime = datetime.now(timezone.utc) - container.started_at
        return jsonify(
            {
                "status": "ok",
                "environment": container.settings.environment,
                "uptime_seconds": int(uptime.total_seconds()),
            }
        )

    @api.route("/logs", methods=["GET"], endpoint="logs")
    def list_logs():
        limit = _parse_limit(request.args.get("limit"), capacity=logs.capacity)
        entries = logs.entries(limit)
        return jsonify({"entries": [e.to_dict() for e in entries], "count": len(entries)})

    @api.route("/logs", methods=["DELETE"], endpoint="clear_logs")
    def clear_logs():
        cleared = logs.clear()
        logger.info("Console log buffer cleared (%d entries)", cleared)
        return jsonify({"cleared": cleared})

    app.register_blueprint(api)
