# tests/conftest.py
import itertools
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from kanban.core.config import Settings
from kanban.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'kanban.db'}", _env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the client runs the lifespan, which bootstraps the schema
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    session = app.state.database.session()
    yield session
    session.close()


@pytest.fixture
def clock(monkeypatch):
    """Deterministic timestamps: every call is one second after the previous one."""
    ticks = itertools.count()
    start = datetime(2026, 1, 1, 12, 0, 0)

    def fake_utcnow():
        return start + timedelta(seconds=next(ticks))

    monkeypatch.setattr("kanban.project.services.utcnow", fake_utcnow)
    monkeypatch.setattr("kanban.ticket.services.utcnow", fake_utcnow)
    return fake_utcnow


@pytest.fixture
def project(client):
    r = client.post("/projects", json={"name": "Launch"})
    assert r.status_code == 201
    return r.json()
