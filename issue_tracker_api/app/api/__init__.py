"""
HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes the
domain‑specific routers from ``endpoints``.  The issue routes are
mounted at the application root because clients address them as
``/issue`` and ``/issues`` directly.
"""
