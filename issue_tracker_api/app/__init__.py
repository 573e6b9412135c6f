"""
Application package initializer.

The service is split into a few small pieces: ``core`` holds
configuration, logging and the error taxonomy, ``schemas`` the
Pydantic payloads, ``services`` the in‑memory store together with the
status transition rules, and ``api`` the HTTP routes.
"""

from .main import app, create_app  # noqa: F401
