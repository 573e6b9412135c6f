"""Shared fixtures for the issue tracker tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from issue_tracker_api.app.main import create_app
from issue_tracker_api.app.services.issue_store import IssueStore
from issue_tracker_api.app.services.user_directory import UserDirectory


class FakeClock:
    """Deterministic clock that moves forward one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def directory():
    return UserDirectory()


@pytest.fixture
def store(directory, clock):
    return IssueStore(directory=directory, clock=clock)


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
