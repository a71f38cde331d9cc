"""Route tests for /api/parties and /api/party/{id}."""

from unittest.mock import MagicMock

import asyncpg
from fastapi.testclient import TestClient

PARTIES = [
    {"id": 1, "name": "JS Juggernauts", "description": "The JS Juggernauts eat, breathe, and sleep JavaScript."},
    {"id": 3, "name": "Git Gurus", "description": None},
]


def test_list_parties(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.fetch.return_value = PARTIES

    response = test_client.get("/api/parties")

    assert response.status_code == 200
    assert response.json() == {"message": "success", "data": PARTIES}


def test_list_parties_is_repeatable(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.fetch.return_value = PARTIES

    first = test_client.get("/api/parties").json()
    second = test_client.get("/api/parties").json()

    assert first == second
    mock_pool.execute.assert_not_called()


def test_list_parties_failure_is_500(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.fetch.side_effect = asyncpg.InterfaceError("pool is closed")

    response = test_client.get("/api/parties")

    assert response.status_code == 500
    assert "pool is closed" in response.json()["error"]


def test_get_party(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.fetchrow.return_value = PARTIES[1]

    response = test_client.get("/api/party/3")

    assert response.json() == {"message": "success", "data": PARTIES[1]}
    assert mock_pool.fetchrow.await_args.args[1] == 3


def test_get_missing_party(test_client: TestClient) -> None:
    response = test_client.get("/api/party/42")

    assert response.status_code == 200
    assert response.json() == {"message": "success", "data": None}


def test_get_party_failure_is_400(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.fetchrow.side_effect = OSError("Connection reset by peer")

    response = test_client.get("/api/party/3")

    assert response.status_code == 400
    assert response.json() == {"error": "Connection reset by peer"}


def test_delete_party(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.execute.return_value = "DELETE 1"

    response = test_client.delete("/api/party/2")

    assert response.json() == {"message": "deleted", "changes": 1, "id": 2}


def test_delete_missing_party(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.execute.return_value = "DELETE 0"

    response = test_client.delete("/api/party/2")

    assert response.status_code == 200
    assert response.json() == {"message": "Party not found"}


def test_delete_party_failure_is_400(test_client: TestClient, mock_pool: MagicMock) -> None:
    mock_pool.execute.side_effect = asyncpg.InterfaceError("connection is closed")

    response = test_client.delete("/api/party/2")

    assert response.status_code == 400
    assert "connection is closed" in response.json()["error"]


def test_no_party_creation_route(test_client: TestClient, mock_pool: MagicMock) -> None:
    response = test_client.post("/api/party", json={"name": "New"})

    assert response.status_code == 404
    assert response.content == b""
    mock_pool.execute.assert_not_called()
