from __future__ import annotations

from flask import Flask

from ..container import Container

_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def register(app: Flask, container: Container) -> None:
    @app.route("/health", endpoint="health")
    def health():
        return "ok", 200, _TEXT

    @app.route("/", endpoint="index")
    def index():
        return "Hiki Vision API is running. Try /console (protected) or /api/*", 200, _TEXT
