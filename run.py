"""Entry point for the issue tracker service.

Starts the FastAPI application under Uvicorn.  Host, port and log
level are read from the ``HOST``, ``PORT`` and ``LOG_LEVEL``
environment variables (defaults ``0.0.0.0``, ``8080`` and ``INFO``).

Usage:
    python run.py
"""
from issue_tracker_api.app.main import run


if __name__ == "__main__":
    try:
        run()
    except (KeyboardInterrupt, SystemExit):
        pass
