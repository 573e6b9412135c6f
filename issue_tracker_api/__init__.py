"""
Top‑level package for the Issue Tracker API.

The HTTP service lives under ``app`` and can be imported with fully
qualified names like ``issue_tracker_api.app.main``.  A small
``requests`` based client for talking to a running service is
available as ``issue_tracker_api.client``.
"""

__all__ = []
