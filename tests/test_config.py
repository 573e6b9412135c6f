"""
Tests for core/config.py and core/logging_config.py.
"""

import logging

import pytest

from issue_tracker_api.app.core.config import Settings
from issue_tracker_api.app.core.logging_config import setup_logging
from issue_tracker_api.app.main import create_app
from issue_tracker_api.app.services.issue_store import IssueStore


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PROJECT_NAME", "API_VERSION", "DEBUG", "LOG_LEVEL", "LOG_FILE", "HOST", "PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.project_name == "Issue Tracker API"
        assert settings.api_version == "1.0.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PROJECT_NAME", "Tracker")
        monkeypatch.setenv("DEBUG", "yes")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PORT", "9000")

        settings = Settings.from_env()

        assert settings.project_name == "Tracker"
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.port == 9000

    @pytest.mark.parametrize("raw", ["0", "false", "no", ""])
    def test_debug_false_values(self, monkeypatch, raw):
        monkeypatch.setenv("DEBUG", raw)
        assert Settings.from_env().debug is False


class TestCreateApp:
    def test_uses_given_store_and_settings(self, monkeypatch):
        monkeypatch.setenv("PROJECT_NAME", "Custom Tracker")
        store = IssueStore()

        app = create_app(store=store, settings=Settings.from_env())

        assert app.state.store is store
        assert app.title == "Custom Tracker"

    def test_fresh_store_per_app(self):
        assert create_app().state.store is not create_app().state.store


class TestSetupLogging:
    def test_does_not_reconfigure(self):
        root = logging.getLogger()
        before = list(root.handlers)
        if not before:
            setup_logging("INFO")
            before = list(root.handlers)

        setup_logging("DEBUG", "ignored.log")

        assert root.handlers == before
