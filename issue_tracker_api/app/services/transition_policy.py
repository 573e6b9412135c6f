"""
Status and assignee transition rules.

Given an issue's current assignee and status plus the changes a caller
asked for, ``resolve_transition`` computes the assignee and status the
issue ends up with.  The rules are evaluated in a fixed order:

1. Assignee change.

   * Clearing the assignee (``userId: 0``) always yields ``PENDING``.
     A status sent in the same request is ignored.
   * Assigning a known user keeps the current status, except that a
     ``PENDING`` issue moves to ``IN_PROGRESS`` when the request carries
     no status of its own.  Unknown users are rejected.
   * Without an assignee change the current assignee is carried over.

2. Status change, unless the assignee was just cleared.  The value must
   be one of the four statuses, and an issue without an assignee may
   only be ``PENDING`` or ``CANCELLED``.

The functions here are pure: they never touch the store and raise
``ValidationError`` before anything is applied, which lets the store
keep updates all‑or‑nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from issue_tracker_api.app.core.errors import ValidationError
from issue_tracker_api.app.schemas.issue import IssueStatus
from issue_tracker_api.app.schemas.user import UserRead
from issue_tracker_api.app.services.user_directory import UserDirectory

# Statuses an issue without an assignee may hold.
UNASSIGNED_STATUSES = frozenset({IssueStatus.PENDING, IssueStatus.CANCELLED})


class AssigneeAction(str, Enum):
    KEEP = "keep"
    CLEAR = "clear"
    ASSIGN = "assign"


@dataclass(frozen=True)
class AssigneeChange:
    """Requested change to an issue's assignee."""

    action: AssigneeAction = AssigneeAction.KEEP
    user_id: Optional[int] = None

    @classmethod
    def keep(cls) -> "AssigneeChange":
        return cls(AssigneeAction.KEEP)

    @classmethod
    def clear(cls) -> "AssigneeChange":
        return cls(AssigneeAction.CLEAR)

    @classmethod
    def assign(cls, user_id: int) -> "AssigneeChange":
        return cls(AssigneeAction.ASSIGN, user_id)

    @classmethod
    def from_user_id(cls, user_id: Optional[int]) -> "AssigneeChange":
        """Translate a payload ``userId``: ``None`` keeps, ``0`` clears."""
        if user_id is None:
            return cls.keep()
        if user_id == 0:
            return cls.clear()
        return cls.assign(user_id)


class Transition(NamedTuple):
    assignee: Optional[UserRead]
    status: IssueStatus


def initial_status(assignee: Optional[UserRead]) -> IssueStatus:
    """Status of a freshly created issue."""
    return IssueStatus.IN_PROGRESS if assignee is not None else IssueStatus.PENDING


def resolve_transition(
    current_assignee: Optional[UserRead],
    current_status: IssueStatus,
    assignee_change: AssigneeChange,
    requested_status: Optional[str],
    directory: UserDirectory,
) -> Transition:
    """Compute the assignee and status that result from a change request.

    Parameters
    ----------
    current_assignee : Optional[UserRead]
        Assignee before the update.
    current_status : IssueStatus
        Status before the update.
    assignee_change : AssigneeChange
        What the caller asked to do with the assignee.
    requested_status : Optional[str]
        Raw status text from the request, ``None`` when not supplied.
    directory : UserDirectory
        Lookup used to resolve assigned user ids.

    Returns
    -------
    Transition
        The resulting ``(assignee, status)`` pair.

    Raises
    ------
    ValidationError
        If the user id is unknown, the status is not recognised, or the
        result would leave an unassigned issue ``IN_PROGRESS`` or
        ``COMPLETED``.
    """
    assignee = current_assignee
    status = current_status

    if assignee_change.action is AssigneeAction.CLEAR:
        return Transition(None, IssueStatus.PENDING)

    if assignee_change.action is AssigneeAction.ASSIGN:
        assignee = directory.require(assignee_change.user_id)
        if status is IssueStatus.PENDING and requested_status is None:
            status = IssueStatus.IN_PROGRESS

    if requested_status is not None:
        new_status = IssueStatus.parse(requested_status)
        if assignee is None and new_status not in UNASSIGNED_STATUSES:
            raise ValidationError(
                "Issues without an assignee can only be PENDING or CANCELLED"
            )
        status = new_status

    return Transition(assignee, status)
