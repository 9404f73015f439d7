from __future__ import annotations

import pytest

from src.worklog_portal.worklog_portal.container import build_container
from src.worklog_portal.worklog_portal.main import create_app
from src.worklog_portal.worklog_portal.storage.bootstrap import initialize_collections
from src.worklog_portal.worklog_portal.storage.memory_store import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def seeded_store(store):
    initialize_collections(store)
    return store


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def app(store, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_SEED_DATA", "0")
    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(seeded_store, client):
    resp = client.post("/api/login", json={"email": "admin", "password": "admin"})
    assert resp.status_code == 200
    return client
