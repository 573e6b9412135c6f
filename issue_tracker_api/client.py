"""Issue tracker API client.

A thin wrapper around the service's HTTP interface built on
``requests``.  Every method returns a tuple ``(data, error)``: on
success ``data`` holds the decoded JSON body and ``error`` is ``None``;
on failure ``data`` is ``None`` (or an empty list for listings) and
``error`` is a dictionary with the keys ``status_code`` and
``message`` taken from the service's ``{"error", "code"}`` envelope.

Example::

    client = IssueTrackerClient(base_url="http://localhost:8080")
    issue, error = client.create_issue("Login button does nothing", user_id=1)
    client.update_issue(issue["id"], status="COMPLETED")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

# Marks keyword arguments the caller did not pass, so that ``None``
# stays available as a real (null) value.
_UNSET: Any = object()

Error = Dict[str, Any]


class IssueTrackerClient:
    """Client for the issue tracker HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Issue operations
    # ------------------------------------------------------------------
    def create_issue(
        self,
        title: str,
        description: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an issue, optionally assigned to ``user_id``."""
        payload: Dict[str, Any] = {"title": title}
        if description is not None:
            payload["description"] = description
        if user_id is not None:
            payload["userId"] = user_id
        return self._request("POST", "/issue", json_body=payload)

    def list_issues(self, status: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return all issues, or only those in ``status``."""
        params = {"status": status} if status else None
        data, error = self._request("GET", "/issues", params=params)
        if error:
            return [], error
        return (data or {}).get("issues") or [], None

    def get_issue(self, issue_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch one issue.  The detail view carries no ``user`` field."""
        return self._request("GET", f"/issue/{issue_id}")

    def update_issue(
        self,
        issue_id: int,
        *,
        title: Any = _UNSET,
        description: Any = _UNSET,
        status: Any = _UNSET,
        user_id: Any = _UNSET,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update an issue.

        Only the keyword arguments actually passed are sent.  Passing
        ``user_id=0`` removes the assignee; see :meth:`unassign_issue`.
        """
        fields = {"title": title, "description": description, "status": status, "userId": user_id}
        payload = {key: value for key, value in fields.items() if value is not _UNSET}
        return self._request("PATCH", f"/issue/{issue_id}", json_body=payload)

    def unassign_issue(self, issue_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Remove the assignee, which puts the issue back to ``PENDING``."""
        return self.update_issue(issue_id, user_id=0)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data or [], None
