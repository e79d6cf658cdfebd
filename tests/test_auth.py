"""Tests for the auth routes and the bearer gate."""

from datetime import timedelta

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from mylife.core.security import create_access_token
from mylife.main import create_app


class TestSignup:
    def test_signup_returns_user_and_token(self, client):
        resp = client.post(
            "/api/auth/signup",
            json={"email": "Ana@Example.com", "name": "Ana", "password": "secret"},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["user"]["email"] == "ana@example.com"
        assert body["user"]["name"] == "Ana"
        assert body["token"]

    def test_password_of_five_rejected(self, client):
        resp = client.post(
            "/api/auth/signup",
            json={"email": "a@example.com", "name": "A", "password": "12345"},
        )
        assert resp.status_code == 400
        assert "at least 6" in resp.json()["detail"]

    def test_password_of_six_accepted(self, client):
        resp = client.post(
            "/api/auth/signup",
            json={"email": "a@example.com", "name": "A", "password": "123456"},
        )
        assert resp.status_code == 201

    def test_duplicate_email_case_insensitive(self, client, signup):
        signup("bo@example.com")
        resp = client.post(
            "/api/auth/signup",
            json={"email": "BO@example.COM", "name": "Bo", "password": "secret123"},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Email already registered"

    def test_missing_field_is_400(self, client):
        resp = client.post("/api/auth/signup", json={"email": "x@example.com", "password": "secret123"})
        assert resp.status_code == 400

    def test_invalid_email_is_400(self, client):
        resp = client.post("/api/auth/signup", json={"email": "nope", "name": "N", "password": "secret123"})
        assert resp.status_code == 400


class TestLogin:
    def test_login_with_correct_password(self, client, signup):
        signup("cy@example.com", password="hunter22")
        resp = client.post("/api/auth/login", json={"email": "CY@example.com", "password": "hunter22"})
        assert resp.status_code == 200
        assert resp.json()["user"]["email"] == "cy@example.com"

    def test_login_with_wrong_password(self, client, signup):
        signup("cy@example.com", password="hunter22")
        resp = client.post("/api/auth/login", json={"email": "cy@example.com", "password": "hunter23"})
        assert resp.status_code == 401


class TestMe:
    def test_me_returns_current_user(self, client, signup):
        account = signup("dee@example.com", name="Dee")
        resp = client.get("/api/auth/me", headers=account["headers"])
        assert resp.status_code == 200
        assert resp.json() == {"user": {"id": account["user"]["id"], "email": "dee@example.com", "name": "Dee"}}

    def test_me_without_header(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_me_with_bad_token(self, client):
        resp = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 401

    def test_me_with_expired_token(self, client, settings, signup):
        account = signup("eve@example.com")
        token = create_access_token(account["user"]["id"], settings, expires_delta=timedelta(seconds=-1))
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401

    def test_me_for_unknown_user(self, client, settings):
        token = create_access_token("ghost", settings)
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 404


class TestPlumbing:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_init_is_idempotent(self, client):
        assert client.post("/api/init").status_code == 200
        assert client.post("/api/init").status_code == 200

    def test_bare_options_without_preflight_headers_is_405(self, client):
        assert client.options("/api/todos").status_code == 405

    def test_cors_preflight(self, client):
        resp = client.options(
            "/api/todos",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, Content-Type",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")

    def test_wrong_method_is_405(self, client, signup):
        account = signup("fay@example.com")
        assert client.patch("/api/todos", headers=account["headers"], json={}).status_code == 405

    def test_unhandled_error_is_generic_500(self, settings):
        app = create_app(settings)

        @app.get("/boom")
        async def boom():
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error on /var/db"))

        with TestClient(app, raise_server_exceptions=False) as test_client:
            resp = test_client.get("/boom")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}
        assert "disk I/O" not in resp.text
