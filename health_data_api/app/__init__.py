"""
Application package initializer.

The application is split into ``core`` (settings and logging),
``services`` (the in‑memory user directory and its errors),
``schemas`` (documented payload shapes) and ``api`` (routers).
"""

from .main import app, create_app  # noqa: F401
