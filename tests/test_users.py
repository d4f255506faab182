"""Tests for User listing endpoints."""
from tests.conftest import create_test_request


class TestUsers:
    def test_list_users_sorted(self, client):
        create_test_request(client, requester="Mike Johnson")
        create_test_request(client, requester="Jane Smith")
        create_test_request(client, requester="John Doe")
        resp = client.get("/api/users")
        assert resp.status_code == 200
        assert [u["name"] for u in resp.json()] == ["Jane Smith", "John Doe", "Mike Johnson"]

    def test_list_users_empty(self, client):
        assert client.get("/api/users").json() == []

    def test_get_user(self, client):
        create_test_request(client, requester="Alice")
        user = client.get("/api/users").json()[0]
        resp = client.get(f"/api/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Alice"
        assert "createdAt" in resp.json()

    def test_get_user_not_found(self, client):
        resp = client.get("/api/users/00000000-0000-0000-0000-000000000000")
        assert resp.status_code == 404

    def test_created_at_is_utc(self, client):
        create_test_request(client, requester="Alice")
        created = client.get("/api/users").json()[0]["createdAt"]
        assert created.endswith("Z") or created.endswith("+00:00")

    def test_list_users_failure(self, client, monkeypatch):
        from sqlalchemy.exc import OperationalError
        from sqlalchemy.orm import Query

        def _boom(self):
            raise OperationalError("SELECT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(Query, "all", _boom)
        resp = client.get("/api/users")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to fetch users"
