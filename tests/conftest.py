# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.config import settings
from todo_api.app.core.db import init_db


@pytest.fixture(autouse=True)
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the app at a fresh SQLite file for every test.

    ``get_connection`` reads ``settings.database_url`` on each call, so
    patching the shared settings instance is enough.
    """
    db_path = tmp_path / "todo.sqlite3"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """TestClient with startup events run (schema init is idempotent)."""
    from todo_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client
