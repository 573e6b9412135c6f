"""
In‑memory issue store.

``IssueStore`` is the single owner of the issue collection and of the
identifier sequence.  Every operation, reads included, runs while
holding one ``threading.Lock`` so concurrent requests handled on
FastAPI's worker threads can never interleave a read‑modify‑write or
observe a half‑written record.

Stored records are frozen ``IssueRead`` models.  An update builds the
replacement record with ``model_copy`` after every check has passed
and swaps it in with a single assignment, so a failed request leaves
the stored issue exactly as it was.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from issue_tracker_api.app.core.errors import ForbiddenError, NotFoundError, ValidationError
from issue_tracker_api.app.schemas.issue import IssueRead, IssueStatus, IssueUpdate
from issue_tracker_api.app.services.transition_policy import (
    AssigneeChange,
    initial_status,
    resolve_transition,
)
from issue_tracker_api.app.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IssueStore:
    """Thread‑safe, process‑lifetime store of issues."""

    def __init__(self, directory: Optional[UserDirectory] = None, clock: Optional[Clock] = None) -> None:
        self.directory = directory or UserDirectory()
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._issues: Dict[int, IssueRead] = {}
        self._next_id = 1

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------
    def create_issue(
        self,
        title: Optional[str],
        description: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> IssueRead:
        """Create a new issue and return it.

        The issue starts ``IN_PROGRESS`` when ``user_id`` names a known
        user and ``PENDING`` otherwise.  The identifier sequence only
        advances once all input has been accepted.

        Raises
        ------
        ValidationError
            If ``title`` is missing or empty, or ``user_id`` is given but
            does not match a known user.
        """
        if not title:
            raise ValidationError("Missing required field: title")
        with self._lock:
            assignee = self.directory.require(user_id) if user_id is not None else None
            now = self._clock()
            issue = IssueRead(
                id=self._next_id,
                title=title,
                description=description or "",
                status=initial_status(assignee),
                user=assignee,
                created_at=now,
                updated_at=now,
            )
            self._issues[issue.id] = issue
            self._next_id += 1
        logger.info(
            "Created issue %s (status=%s, assignee=%s)",
            issue.id,
            issue.status.value,
            assignee.id if assignee else None,
        )
        return issue

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------
    def list_issues(self, status: Optional[str] = None) -> List[IssueRead]:
        """Return issues in creation order, optionally filtered by status.

        ``None`` and the empty string both mean "no filter".  Any other
        value must name one of the four statuses.
        """
        wanted = IssueStatus.parse(status) if status else None
        with self._lock:
            issues = [issue for issue in self._issues.values() if wanted is None or issue.status is wanted]
        logger.debug("Listed %d issues (filter=%s)", len(issues), wanted.value if wanted else None)
        return issues

    def get_issue(self, issue_id: int) -> IssueRead:
        """Return the issue with ``issue_id``.

        Raises ``ValidationError`` for a non‑positive id and
        ``NotFoundError`` when no such issue exists.
        """
        self._check_id(issue_id)
        with self._lock:
            issue = self._issues.get(issue_id)
        if issue is None:
            raise NotFoundError("Issue not found")
        logger.debug("Fetched issue %s", issue_id)
        return issue

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------
    def update_issue(self, issue_id: int, changes: IssueUpdate) -> IssueRead:
        """Apply ``changes`` to an issue and return the updated record.

        Issues that are ``COMPLETED`` or ``CANCELLED`` are rejected before
        any field of ``changes`` is looked at.  Assignee and status are
        resolved by :func:`resolve_transition`; title and description
        are overwritten as given.

        Raises
        ------
        ValidationError
            For a malformed id, an unknown user, an unknown status or a
            status an unassigned issue may not hold.
        NotFoundError
            If the issue does not exist.
        ForbiddenError
            If the issue is in a terminal state.
        """
        self._check_id(issue_id)
        with self._lock:
            current = self._issues.get(issue_id)
            if current is None:
                raise NotFoundError("Issue not found")
            if current.status.is_terminal:
                raise ForbiddenError("Completed or cancelled issues cannot be updated")

            transition = resolve_transition(
                current.user,
                current.status,
                AssigneeChange.from_user_id(changes.user_id),
                changes.status,
                self.directory,
            )
            update = {
                "user": transition.assignee,
                "status": transition.status,
                "updated_at": self._clock(),
            }
            if changes.title is not None:
                update["title"] = changes.title
            if changes.description is not None:
                update["description"] = changes.description
            issue = current.model_copy(update=update)
            self._issues[issue_id] = issue
        logger.info(
            "Updated issue %s (status %s -> %s, assignee=%s)",
            issue_id,
            current.status.value,
            issue.status.value,
            issue.user.id if issue.user else None,
        )
        return issue

    def __len__(self) -> int:
        with self._lock:
            return len(self._issues)

    @staticmethod
    def _check_id(issue_id: int) -> None:
        if isinstance(issue_id, bool) or not isinstance(issue_id, int) or issue_id <= 0:
            raise ValidationError("Invalid issue id")
