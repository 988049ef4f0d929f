"""
Tests for the HTTP surface of the GraphQL endpoint
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from membergraph.api.app import create_app
from membergraph.store import InMemoryStore


@pytest.fixture
def client():
    with TestClient(create_app(InMemoryStore())) as client:
        yield client


def post_graphql(client, query, variables=None):
    payload = {"query": query}
    if variables is not None:
        payload["variables"] = variables
    return client.post("/graphql", json=payload)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_then_list_users(client):
    created = post_graphql(
        client,
        "mutation($dto: CreateUserInput!) { createUser(dto: $dto) { id name balance } }",
        {"dto": {"name": "A", "balance": 10}},
    )
    assert created.status_code == 200
    user = created.json()["data"]["createUser"]
    assert user["name"] == "A"

    listed = post_graphql(client, "{ users { id name } }")
    body = listed.json()
    assert body["data"] == {"users": [{"id": user["id"], "name": "A"}]}
    assert "errors" not in body


def test_missing_user_is_null(client):
    response = post_graphql(
        client, "query($id: UUID!) { user(id: $id) { id } }", {"id": str(uuid.uuid4())}
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"user": None}}


def test_delete_missing_user_reports_error(client):
    response = post_graphql(
        client, "mutation($id: UUID!) { deleteUser(id: $id) }", {"id": str(uuid.uuid4())}
    )

    body = response.json()
    assert body["data"] == {"deleteUser": None}
    assert len(body["errors"]) == 1
    assert body["errors"][0]["path"] == ["deleteUser"]


def test_validation_error_has_no_data(client):
    response = post_graphql(client, "{ memberType(id: premium) { id } }")

    body = response.json()
    assert body["data"] is None
    assert body["errors"]


def test_request_without_query_is_rejected(client):
    response = client.post("/graphql", json={"variables": {}})

    assert response.status_code == 400


def test_get_requests_are_not_served(client):
    response = client.get("/graphql", params={"query": "{ users { id } }"})

    assert response.status_code != 200


def test_separate_apps_do_not_share_stores():
    first = TestClient(create_app(InMemoryStore()))
    second = TestClient(create_app(InMemoryStore()))

    post_graphql(
        first,
        "mutation { createUser(dto: {name: \"A\", balance: 1}) { id } }",
    )

    assert post_graphql(second, "{ users { id } }").json()["data"] == {"users": []}
