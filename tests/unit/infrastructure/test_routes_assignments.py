"""Tests for assignment endpoints with overridden use cases."""

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.domain.entities.assignment_candidate import AssignedUser
from app.domain.value_objects.enums import ActionKind
from app.infrastructure.api.dependencies import (
    get_batch_resolve_assignments_uc,
    get_resolve_assignments_uc,
)
from app.main import app

BOB = AssignedUser(
    actor_id="u2", display_name="Bob", email="bob@x", role="reviewer",
    action_kind=ActionKind.ASSIGNED,
)


class StubResolve:
    def __init__(self):
        self.calls = []

    async def execute(self, task_id, exclude_actor_id=None):
        self.calls.append((task_id, exclude_actor_id))
        return [BOB] if task_id == "t1" else []


class StubBatch:
    def __init__(self):
        self.calls = []

    async def execute(self, task_ids):
        self.calls.append(task_ids)
        return {t: ([BOB] if t == "t1" else []) for t in dict.fromkeys(task_ids)}


@pytest.fixture
def stubs():
    resolve, batch = StubResolve(), StubBatch()
    app.dependency_overrides[get_resolve_assignments_uc] = lambda: resolve
    app.dependency_overrides[get_batch_resolve_assignments_uc] = lambda: batch
    yield resolve, batch
    app.dependency_overrides.clear()


@pytest.fixture
def client(stubs):
    return TestClient(app)


def test_get_assignments(client, stubs):
    resolve, _ = stubs
    response = client.get("/api/tasks/t1/assignments", params={"exclude_actor_id": "me"})
    assert response.status_code == 200
    assert response.json() == {
        "task_id": "t1",
        "assignments": [{
            "user_id": "u2", "name": "Bob", "email": "bob@x",
            "role": "reviewer", "action_type": "assigned_to",
        }],
    }
    assert resolve.calls == [("t1", "me")]


def test_get_assignments_empty(client):
    response = client.get("/api/tasks/other/assignments")
    assert response.status_code == 200
    assert response.json() == {"task_id": "other", "assignments": []}


def test_batch_assignments(client, stubs):
    _, batch = stubs
    response = client.post("/api/tasks/assignments/batch", json={"task_ids": ["t1", "t2", ""]})
    assert response.status_code == 200
    body = response.json()
    assert body["t1"][0]["user_id"] == "u2"
    assert body["t2"] == []
    assert batch.calls == [["t1", "t2"]]


def test_batch_empty_list(client, stubs):
    _, batch = stubs
    response = client.post("/api/tasks/assignments/batch", json={"task_ids": []})
    assert response.status_code == 200
    assert response.json() == {}
    assert batch.calls == []


def test_batch_too_many_tasks(client, monkeypatch):
    monkeypatch.setattr(settings, "batch_max_tasks", 2)
    response = client.post("/api/tasks/assignments/batch", json={"task_ids": ["a", "b", "c"]})
    assert response.status_code == 422


def test_batch_invalid_body(client):
    response = client.post("/api/tasks/assignments/batch", json={"task_ids": "t1"})
    assert response.status_code == 422
