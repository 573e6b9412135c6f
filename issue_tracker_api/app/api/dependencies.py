"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from issue_tracker_api.app.core.errors import ValidationError
from issue_tracker_api.app.services.issue_store import IssueStore
from issue_tracker_api.app.services.user_directory import UserDirectory


def get_issue_store(request: Request) -> IssueStore:
    """Return the store created together with the running application."""
    return request.app.state.store


def get_user_directory(request: Request) -> UserDirectory:
    return request.app.state.store.directory


def parse_issue_id(issue_id: str) -> int:
    """Convert a path segment into a positive issue id.

    The id is taken as text so that ``/issue/abc`` and ``/issue/0`` are
    both reported as ``Invalid issue id`` with status 400 instead of
    FastAPI's generic validation error.
    """
    try:
        value = int(issue_id)
    except ValueError:
        raise ValidationError("Invalid issue id") from None
    if value <= 0:
        raise ValidationError("Invalid issue id")
    return value
