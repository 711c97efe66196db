"""Integration tests for the auth and user endpoints."""

from marketplace.identity.user import User
from protean.utils.globals import current_domain


class TestRegisterEndpoint:
    def test_register(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "alice@example.com", "password": "s3cret", "username": "alice"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "alice@example.com"
        assert data["username"] == "alice"
        assert "password" not in data and "password_hash" not in data

        assert current_domain.repository_for(User).get(data["id"]).username == "alice"

    def test_duplicate_email(self, client):
        body = {"email": "alice@example.com", "password": "s3cret", "username": "alice"}
        client.post("/api/auth/register", json=body)

        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 400
        assert "already registered" in response.json()["error"]

    def test_missing_field(self, client):
        response = client.post("/api/auth/register", json={"email": "alice@example.com"})
        assert response.status_code == 400
        assert "error" in response.json()


class TestLoginEndpoint:
    def test_login_returns_token_and_user(self, client):
        client.post(
            "/api/auth/register",
            json={"email": "alice@example.com", "password": "s3cret", "username": "alice"},
        )
        response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "s3cret"})
        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "alice@example.com"

    def test_wrong_password(self, client):
        client.post(
            "/api/auth/register",
            json={"email": "alice@example.com", "password": "s3cret", "username": "alice"},
        )
        response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_email(self, client):
        response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "s3cret"})
        assert response.status_code == 401


class TestProfileEndpoints:
    def test_get_profile(self, client, signup):
        user, _ = signup()
        response = client.get(f"/api/user/{user['id']}")
        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_get_unknown_profile(self, client):
        response = client.get("/api/user/missing-user")
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_update_own_profile(self, client, signup):
        user, headers = signup()
        response = client.put(f"/api/user/{user['id']}", json={"username": "alice_w"}, headers=headers)
        assert response.status_code == 200
        assert response.json()["username"] == "alice_w"
        assert response.json()["email"] == "alice@example.com"

    def test_update_requires_token(self, client, signup):
        user, _ = signup()
        response = client.put(f"/api/user/{user['id']}", json={"username": "x"})
        assert response.status_code == 401

    def test_cannot_update_someone_else(self, client, signup):
        alice, _ = signup()
        _, bob_headers = signup(email="bob@example.com", username="bob")

        response = client.put(f"/api/user/{alice['id']}", json={"username": "hacked"}, headers=bob_headers)
        assert response.status_code == 403

    def test_email_collision(self, client, signup):
        signup(email="bob@example.com", username="bob")
        alice, headers = signup()

        response = client.put(f"/api/user/{alice['id']}", json={"email": "bob@example.com"}, headers=headers)
        assert response.status_code == 400

    def test_listing_summary_for_user_without_listings(self, client, signup):
        user, _ = signup()
        response = client.get(f"/api/user/{user['id']}/listings")
        assert response.status_code == 200
        assert response.json() == {"count": 0, "total_value": 0.0, "average_price": 0.0}
