# tests/test_client.py

from __future__ import annotations

from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient

from todo_client import TodoAPI


class AppSession(requests.Session):
    """
    requests.Session that answers from the ASGI app instead of the network.

    The TestClient response is copied into a real ``requests.Response`` so
    the client's ``raise_for_status``/``HTTPError`` handling is exercised
    unchanged.
    """

    def __init__(self, client: TestClient) -> None:
        super().__init__()
        self.client = client
        self.calls: list[tuple[str, str]] = []

    def request(self, method: str, url: str, params=None, json=None, timeout=None, **kwargs: Any):
        self.calls.append((method, url))
        upstream = self.client.request(method, url, params=params, json=json)
        response = requests.Response()
        response.status_code = upstream.status_code
        response._content = upstream.content
        response.headers.update(upstream.headers)
        response.url = url
        response.reason = upstream.reason_phrase
        return response


class OfflineSession(requests.Session):
    def request(self, method: str, url: str, **kwargs: Any):
        raise requests.ConnectionError("connection refused")


@pytest.fixture()
def api(client: TestClient) -> TodoAPI:
    return TodoAPI(base_url="http://testserver/", session=AppSession(client))


def test_client_user_and_task_workflow(api: TodoAPI) -> None:
    user, error = api.create_user("Alice Johnson", "alice@example.com")
    assert error is None
    assert user["email"] == "alice@example.com"

    first, error = api.create_task(user["id"], "Buy groceries", "Milk, bread, eggs")
    assert error is None
    assert first["isCompleted"] is False
    second, _ = api.create_task(user["id"], "Finish project report", is_completed=True)

    tasks, error = api.list_user_tasks(user["id"])
    assert error is None
    assert [t["id"] for t in tasks] == [first["id"], second["id"]]

    done, _ = api.list_user_tasks(user["id"], is_completed=True)
    assert done == [second]

    patched, error = api.update_task_status(first["id"], True)
    assert error is None
    assert patched["isCompleted"] is True

    replaced, error = api.update_task(second["id"], "Report", None, False)
    assert error is None
    assert replaced["title"] == "Report"
    assert replaced["description"] is None

    fetched, _ = api.get_task(first["id"])
    assert fetched == patched

    deleted, error = api.delete_task(second["id"])
    assert (deleted, error) == (True, None)

    all_tasks, _ = api.list_tasks()
    assert [t["id"] for t in all_tasks] == [first["id"]]

    renamed, error = api.update_user(user["id"], "Alice J.", "alice@example.com")
    assert error is None
    assert renamed["name"] == "Alice J."
    assert api.get_user(user["id"]) == (renamed, None)
    assert api.list_users() == ([renamed], None)

    assert api.delete_user(user["id"]) == (True, None)
    assert api.list_tasks() == ([], None)


def test_client_reports_server_errors(api: TodoAPI) -> None:
    api.create_user("Bob Smith", "bob@example.com")

    data, error = api.create_user("Bob Jones", "bob@example.com")
    assert data is None
    assert error == {"status_code": 409, "message": "User with email bob@example.com already exists"}

    data, error = api.get_user(9999)
    assert data is None
    assert error == {"status_code": 404, "message": "User not found with id: 9999"}

    tasks, error = api.list_user_tasks(9999)
    assert tasks == []
    assert error["status_code"] == 404

    deleted, error = api.delete_task(9999)
    assert deleted is False
    assert error == {"status_code": 404, "message": "Task not found with id: 9999"}


def test_client_builds_api_urls(api: TodoAPI) -> None:
    api.list_users()
    assert api.session.calls == [("GET", "http://testserver/api/users")]


def test_client_reports_transport_errors() -> None:
    api = TodoAPI(base_url="http://localhost:1", session=OfflineSession())

    data, error = api.get_task(1)

    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
