"""
Pydantic schemas and the status enumeration for issues.

``IssueCreate`` and ``IssueUpdate`` describe request bodies.  In update
bodies an omitted field and an explicit ``null`` both mean "no change";
``"userId": 0`` is the only way to remove an assignee.

``IssueRead`` is the full record returned by create, list and update;
``IssueDetail`` is the projection used by the single issue view, which
deliberately leaves out the assignee.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from issue_tracker_api.app.core.errors import ValidationError
from issue_tracker_api.app.schemas.user import UserRead


class IssueStatus(str, Enum):
    """The fixed four‑state issue lifecycle."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, raw: str) -> "IssueStatus":
        """Return the member named by ``raw`` or raise ``ValidationError``."""
        try:
            return cls(raw)
        except ValueError:
            raise ValidationError(f"Invalid status: {raw}") from None

    @property
    def is_terminal(self) -> bool:
        return self in (IssueStatus.COMPLETED, IssueStatus.CANCELLED)


class _CamelModel(BaseModel):
    # Request bodies only accept the camelCase wire names.
    model_config = ConfigDict(alias_generator=to_camel)


class IssueCreate(_CamelModel):
    """Request body for ``POST /issue``."""

    # Emptiness is checked by the store so a missing title and an empty
    # one produce the same error.
    title: Optional[str] = Field(None, examples=["Login button does nothing"])
    description: Optional[str] = None
    user_id: Optional[StrictInt] = Field(None, description="Assignee; omit to create an unassigned issue")


class IssueUpdate(_CamelModel):
    """Request body for ``PATCH /issue/{id}``.

    Every field is optional.  ``user_id`` is tri‑state: omitted (or
    ``null``) keeps the current assignee, ``0`` removes it and any
    other value assigns that user.  Range checks on the id happen in the
    store, after the issue has been found and checked for a terminal
    state; booleans and numeric strings are rejected outright.  ``status`` is kept as raw text and
    parsed by the transition rules, after the assignee has been checked.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = Field(None, examples=["IN_PROGRESS"])
    user_id: Optional[StrictInt] = Field(None, description="0 removes the assignee")


class IssueDetail(_CamelModel):
    """Single issue view without the assignee."""

    id: int
    title: str
    description: str = ""
    status: IssueStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class IssueRead(IssueDetail):
    """Full issue record including the assignee, if any."""

    user: Optional[UserRead] = None

    def to_detail(self) -> IssueDetail:
        return IssueDetail.model_validate(self.model_dump(exclude={"user"}))


class IssueList(BaseModel):
    """Response body for ``GET /issues``."""

    issues: List[IssueRead] = Field(default_factory=list)
