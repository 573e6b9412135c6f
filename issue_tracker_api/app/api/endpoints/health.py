"""Liveness endpoint."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from issue_tracker_api.app.api.dependencies import get_issue_store
from issue_tracker_api.app.services.issue_store import IssueStore

router = APIRouter()


@router.get("", summary="Service health")
def health(store: IssueStore = Depends(get_issue_store)) -> Dict[str, Any]:
    return {"status": "ok", "issues": len(store)}
