"""Integration tests for the participant API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


def test_participant_crud_flow(client: TestClient) -> None:
    """Exercise the full lifecycle of a participant."""

    response = client.post("/participants/", json={"name": "Ana"})
    assert response.status_code == 201
    created = response.json()
    participant_id = created["id"]
    assert created["name"] == "Ana"

    list_response = client.get("/participants/")
    assert list_response.status_code == 200
    assert list_response.json() == [created]

    detail_response = client.get(f"/participants/{participant_id}")
    assert detail_response.status_code == 200
    assert detail_response.json() == created

    update_response = client.put(f"/participants/{participant_id}", json={"name": "Bea"})
    assert update_response.status_code == 200
    assert update_response.json() == {"id": participant_id, "name": "Bea"}

    delete_response = client.delete(f"/participants/{participant_id}")
    assert delete_response.status_code == 200
    assert delete_response.json() == {"id": participant_id, "name": "Bea"}

    not_found_response = client.get(f"/participants/{participant_id}")
    assert not_found_response.status_code == 404


@pytest.mark.parametrize("payload", [{"name": ""}, {}])
def test_create_participant_requires_name(client: TestClient, payload) -> None:
    response = client.post("/participants/", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "kind": "InvalidInput",
        "message": "Name cannot be empty",
    }
    assert client.get("/participants/").json() == []


def test_unknown_participant_returns_not_found(client: TestClient) -> None:
    assert client.get("/participants/missing").status_code == 404
    assert client.put("/participants/missing", json={"name": "x"}).status_code == 404
    assert client.delete("/participants/missing").status_code == 404


def test_renaming_does_not_change_linked_copies(client: TestClient) -> None:
    activity = client.post(
        "/activities/",
        json={
            "activityType": "post",
            "description": "d",
            "date": "2024-05-01",
            "time": "10:00",
            "duration": "15",
        },
    ).json()
    participant = client.post("/participants/", json={"name": "Ana"}).json()
    client.post(f"/activities/{activity['id']}/participants/{participant['id']}")

    client.put(f"/participants/{participant['id']}", json={"name": "Ana Maria"})

    detail = client.get(f"/activities/{activity['id']}").json()
    assert detail["participants"] == [{"id": participant["id"], "name": "Ana"}]


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize(
    "payload", [{"name": "x" * 256}, {"name": 5}, {"name": "Ana", "email": "a@b.c"}]
)
def test_create_participant_schema_errors_are_invalid_input(
    client: TestClient, payload
) -> None:
    response = client.post("/participants/", json=payload)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["kind"] == "InvalidInput"
    assert detail["message"].startswith("Invalid Payload: ")
    assert client.get("/participants/").json() == []
