"""Simple Health Data Server client.

A thin wrapper around the server's REST API using the ``requests``
library.  The client exposes one method per operation:

* :meth:`HealthDataClient.list_users` – return all user records.
* :meth:`HealthDataClient.get_user` – fetch a single user by id.
* :meth:`HealthDataClient.create_user` – add a user record.
* :meth:`HealthDataClient.update_user` – merge fields into a user record.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``; for HTTP errors
the message is the ``error`` string sent by the server (e.g.
``"User not found"``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class HealthDataClient:
    """Client for the user endpoints of the health data server."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns ``(data, None)`` on success and ``(None, error)`` on
        failure.
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Could not reach %s: %s", url, exc)
            return None, {"status_code": None, "message": str(exc)}
        if not response.ok:
            message = _error_message(response)
            logger.warning("%s %s returned %s: %s", method, url, response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return (response.json() if response.content else None), None

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user.  The server echoes ``payload`` back unchanged."""
        return self._request("POST", "/users", json_body=payload)

    def update_user(
        self, user_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``payload`` into the user with ``user_id``.

        Attempting to change the user's name fails with status 400.
        """
        return self._request("PUT", f"/users/{user_id}", json_body=payload)


def _error_message(response: requests.Response) -> str:
    """Extract the server's ``error`` string, falling back to the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or ""
    if isinstance(body, dict) and body.get("error"):
        return body["error"]
    return str(body)
