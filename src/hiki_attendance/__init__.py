"""Hiki Vision attendance backend.

Feature modules (console, system) expose a ``register(app, container)`` hook
and are wired together by :func:`hiki_attendance.main.create_app`.
"""
