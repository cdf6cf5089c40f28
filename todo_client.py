"""Todo API client.

A thin wrapper around the REST API served by ``todo_api``.  The client
uses the ``requests`` library internally and exposes one method per
route:

* users: :meth:`create_user`, :meth:`get_user`, :meth:`list_users`,
  :meth:`update_user`, :meth:`delete_user`
* tasks: :meth:`create_task`, :meth:`get_task`, :meth:`list_tasks`,
  :meth:`list_user_tasks`, :meth:`update_task`,
  :meth:`update_task_status`, :meth:`delete_task`

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``.  On failure ``data`` is ``None`` (or an empty list / ``False``
for list and delete calls) and ``error`` is a dictionary with the keys
``status_code`` and ``message``; the message is taken from the
``{"message": ...}`` body the server sends for 404 and 409 responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TodoAPI:
    """Client for interacting with the Todo API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
                The ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``PATCH``, ``DELETE``).
            path: Path below ``/api`` (e.g. ``/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as HTTP 204.
        """
        url = f"{self.base_url}/api{path}"
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
            # ``Response.__bool__`` is False for error statuses, so compare
            # against None explicitly.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user.  A taken email yields ``status_code`` 409."""
        return self._request("POST", "/users", json_body={"name": name, "email": email})

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/users/{user_id}")

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users")

    def update_user(self, user_id: int, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/users/{user_id}", json_body={"name": name, "email": email})

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a user; the server removes the user's tasks as well."""
        return self._delete(f"/users/{user_id}")

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def create_task(
        self,
        user_id: int,
        title: str,
        description: Optional[str] = None,
        is_completed: Optional[bool] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a task for ``user_id``.

        ``is_completed`` is left out of the body when ``None`` so the
        server default (``False``) applies.
        """
        payload: Dict[str, Any] = {"title": title, "description": description, "userId": user_id}
        if is_completed is not None:
            payload["isCompleted"] = is_completed
        return self._request("POST", "/tasks", json_body=payload)

    def get_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/tasks/{task_id}")

    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/tasks")

    def list_user_tasks(
        self, user_id: int, is_completed: Optional[bool] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List the tasks of one user, optionally filtered by completion."""
        params = None
        if is_completed is not None:
            params = {"isCompleted": "true" if is_completed else "false"}
        return self._list(f"/tasks/user/{user_id}", params=params)

    def update_task(
        self,
        task_id: int,
        title: str,
        description: Optional[str],
        is_completed: bool,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"title": title, "description": description, "isCompleted": is_completed}
        return self._request("PUT", f"/tasks/{task_id}", json_body=payload)

    def update_task_status(self, task_id: int, is_completed: bool) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/tasks/{task_id}/status", json_body={"isCompleted": is_completed})

    def delete_task(self, task_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/tasks/{task_id}")
