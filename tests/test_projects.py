# tests/test_projects.py
import re
from datetime import datetime

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z$")


def test_create_project_with_name_only(client):
    r = client.post("/projects", json={"name": "Launch"})
    assert r.status_code == 201
    data = r.json()
    assert set(data) == {"id", "name", "description", "createdAt", "updatedAt"}
    assert data["name"] == "Launch"
    assert data["description"] == ""
    assert data["createdAt"] == data["updatedAt"]
    assert ISO_UTC.match(data["createdAt"])


def test_create_project_requires_name(client):
    r = client.post("/projects", json={"description": "no name"})
    assert r.status_code == 400
    assert r.json()["detail"] == "name: Field required"

    r2 = client.post("/projects", json={"name": ""})
    assert r2.status_code == 400


def test_list_projects_newest_first(client, clock):
    first = client.post("/projects", json={"name": "First"}).json()
    second = client.post("/projects", json={"name": "Second"}).json()

    r = client.get("/projects")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [second["id"], first["id"]]


def test_get_project(client, project):
    r = client.get(f"/projects/{project['id']}")
    assert r.status_code == 200
    assert r.json() == project


def test_get_unknown_project_returns_404(client):
    r = client.get("/projects/nope")
    assert r.status_code == 404
    assert r.json()["detail"] == "Project not found"


def test_update_project_merges_fields(client, clock):
    created = client.post("/projects", json={"name": "Old", "description": "Keep me"}).json()

    r = client.put(f"/projects/{created['id']}", json={"name": "New"})
    assert r.status_code == 200
    data = r.json()
    assert data["name"] == "New"
    assert data["description"] == "Keep me"
    assert data["createdAt"] == created["createdAt"]
    assert data["updatedAt"] > created["updatedAt"]


def test_update_unknown_project_returns_404(client):
    r = client.put("/projects/nope", json={"name": "X"})
    assert r.status_code == 404


def test_delete_project_removes_its_tickets(client, project):
    other = client.post("/projects", json={"name": "Other"}).json()
    client.post("/tickets", json={"title": "Mine", "projectId": project["id"]})
    kept = client.post("/tickets", json={"title": "Theirs", "projectId": other["id"]}).json()

    r = client.delete(f"/projects/{project['id']}")
    assert r.status_code == 204

    assert client.get(f"/projects/{project['id']}").status_code == 404
    assert client.get("/tickets", params={"projectId": project["id"]}).json() == []
    assert [t["id"] for t in client.get("/tickets").json()] == [kept["id"]]


def test_delete_unknown_project_returns_404(client):
    r = client.delete("/projects/nope")
    assert r.status_code == 404
    assert r.json()["detail"] == "Project not found"


def test_name_longer_than_column_is_rejected(client, project):
    r = client.post("/projects", json={"name": "n" * 256})
    assert r.status_code == 400
    assert r.json()["detail"].startswith("name:")

    r2 = client.put(f"/projects/{project['id']}", json={"name": "n" * 256})
    assert r2.status_code == 400
    assert client.get(f"/projects/{project['id']}").json()["name"] == "Launch"


def test_update_advances_updated_at_on_a_frozen_clock(client, monkeypatch):
    frozen = datetime(2026, 3, 1, 9, 0, 0)
    monkeypatch.setattr("kanban.project.services.utcnow", lambda: frozen)

    created = client.post("/projects", json={"name": "Same instant"}).json()
    first = client.put(f"/projects/{created['id']}", json={"description": "one"}).json()
    second = client.put(f"/projects/{created['id']}", json={"description": "two"}).json()
    assert created["updatedAt"] < first["updatedAt"] < second["updatedAt"]
