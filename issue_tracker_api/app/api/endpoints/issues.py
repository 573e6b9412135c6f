"""
Issue endpoints.

Create, list, fetch and update issues.  Handlers are plain functions so
FastAPI runs each request on its worker threadpool; the store lock is
what keeps them from stepping on each other.  Errors raised by the
store propagate to the handlers registered in ``core.errors``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from issue_tracker_api.app.api.dependencies import get_issue_store, parse_issue_id
from issue_tracker_api.app.schemas.issue import (
    IssueCreate,
    IssueDetail,
    IssueList,
    IssueRead,
    IssueUpdate,
)
from issue_tracker_api.app.services.issue_store import IssueStore

router = APIRouter()


@router.post(
    "/issue",
    response_model=IssueRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create an issue",
)
def create_issue(
    issue_in: IssueCreate,
    store: IssueStore = Depends(get_issue_store),
) -> IssueRead:
    """Create an issue.

    The new issue is ``IN_PROGRESS`` when ``userId`` is given and
    ``PENDING`` otherwise.  A missing title or an unknown ``userId``
    yields 400.
    """
    return store.create_issue(issue_in.title, issue_in.description, issue_in.user_id)


@router.get(
    "/issues",
    response_model=IssueList,
    response_model_exclude_none=True,
    summary="List issues",
)
def list_issues(
    status_filter: Optional[str] = Query(
        None,
        alias="status",
        description="Only return issues in this status (PENDING, IN_PROGRESS, COMPLETED, CANCELLED).",
    ),
    store: IssueStore = Depends(get_issue_store),
) -> IssueList:
    """Return all issues in creation order, with their assignees."""
    return IssueList(issues=store.list_issues(status_filter))


@router.get("/issue/{issue_id}", response_model=IssueDetail, summary="Get an issue")
def get_issue(
    issue_id: str,
    store: IssueStore = Depends(get_issue_store),
) -> IssueDetail:
    """Return a single issue.  The assignee is not part of this view."""
    return store.get_issue(parse_issue_id(issue_id)).to_detail()


@router.patch(
    "/issue/{issue_id}",
    response_model=IssueRead,
    response_model_exclude_none=True,
    summary="Update an issue",
)
def update_issue(
    issue_id: str,
    changes: IssueUpdate,
    store: IssueStore = Depends(get_issue_store),
) -> IssueRead:
    """Update title, description, status or assignee of an issue.

    ``"userId": 0`` removes the assignee and resets the status to
    ``PENDING``.  Completed and cancelled issues answer 403.
    """
    return store.update_issue(parse_issue_id(issue_id), changes)
