"""API tests for /auth/register, /auth/login and the bearer/role dependencies."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from stock_api.core.config import settings
from stock_api.core.security import decode_access_token
from stock_api.models.user import Role
from tests.support import DEFAULT_PASSWORD, ApiTestCase


def _register_body(**overrides: str) -> dict[str, str]:
    body = {"username": "alice", "email": "alice@example.com", "password": DEFAULT_PASSWORD}
    body.update(overrides)
    return body


class TestRegister(ApiTestCase):
    def test_register_creates_user(self) -> None:
        resp = self.client.post("/auth/register", json=_register_body())
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["message"], "User created")
        self.assertIsInstance(resp.json()["id"], int)

    def test_duplicate_username_conflicts(self) -> None:
        self.client.post("/auth/register", json=_register_body())
        resp = self.client.post(
            "/auth/register", json=_register_body(email="other@example.com")
        )
        self.assertEqual(resp.status_code, 409)

    def test_duplicate_email_conflicts_case_insensitively(self) -> None:
        self.client.post("/auth/register", json=_register_body())
        resp = self.client.post(
            "/auth/register",
            json=_register_body(username="alice2", email="  ALICE@example.com "),
        )
        self.assertEqual(resp.status_code, 409)

    def test_invalid_input_is_400(self) -> None:
        cases = [
            _register_body(email="not-an-email"),
            _register_body(password="short"),
            _register_body(username="ab"),
            {"username": "alice", "password": DEFAULT_PASSWORD},
        ]
        for body in cases:
            with self.subTest(body=body):
                resp = self.client.post("/auth/register", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json()["detail"], "Validation failed")
                self.assertTrue(resp.json()["errors"])

    def test_role_in_body_is_ignored(self) -> None:
        body = _register_body()
        body["role"] = "admin"
        self.client.post("/auth/register", json=body)
        resp = self.client.post(
            "/auth/login", json={"email": "alice@example.com", "password": DEFAULT_PASSWORD}
        )
        self.assertEqual(decode_access_token(resp.json()["token"])["role"], "user")


class TestLogin(ApiTestCase):
    def test_register_then_login_returns_default_role_token(self) -> None:
        self.client.post("/auth/register", json=_register_body())
        resp = self.client.post(
            "/auth/login", json={"email": "Alice@Example.com", "password": DEFAULT_PASSWORD}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["token_type"], "bearer")
        claims = decode_access_token(resp.json()["token"])
        self.assertEqual(claims["username"], "alice")
        self.assertEqual(claims["role"], Role.USER.value)
        self.assertIsInstance(claims["id"], int)

    def test_wrong_password_is_401(self) -> None:
        self.make_user()
        resp = self.client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "wrong-password"}
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Invalid credentials")

    def test_unknown_email_is_401(self) -> None:
        resp = self.client.post(
            "/auth/login", json={"email": "nobody@example.com", "password": DEFAULT_PASSWORD}
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Invalid credentials")


class TestBearerAndRoles(ApiTestCase):
    """The /protected, /admin and /metrics routes exercise get_current_user and require_admin."""

    def test_public_needs_no_token(self) -> None:
        self.assertEqual(self.client.get("/public").status_code, 200)

    def test_missing_header_is_401(self) -> None:
        resp = self.client.get("/protected")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "No token provided")

    def test_non_bearer_scheme_is_401(self) -> None:
        resp = self.client.get("/protected", headers={"Authorization": "Basic abc"})
        self.assertEqual(resp.status_code, 401)

    def test_missing_header_advertises_bearer_scheme(self) -> None:
        resp = self.client.get("/protected")
        self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")

    def test_malformed_token_is_403(self) -> None:
        resp = self.client.get("/protected", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["detail"], "Invalid or expired token")

    def test_expired_token_is_403(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=1)
        token = jwt.encode(
            {"id": 1, "username": "u", "role": "admin", "exp": past},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        resp = self.client.get("/protected", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 403)

    def test_token_with_unknown_role_is_403(self) -> None:
        token = jwt.encode(
            {"id": 1, "username": "u", "role": "root", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        resp = self.client.get("/protected", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 403)

    def test_valid_token_reaches_protected(self) -> None:
        resp = self.client.get("/protected", headers=self.user_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertIn("tester", resp.json()["message"])

    def test_admin_route_denies_user_role(self) -> None:
        resp = self.client.get("/admin", headers=self.user_headers)
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["detail"], "Access denied")

    def test_admin_route_allows_admin_role(self) -> None:
        resp = self.client.get("/admin", headers=self.admin_headers)
        self.assertEqual(resp.status_code, 200)

    def test_admin_route_without_token_is_401(self) -> None:
        self.assertEqual(self.client.get("/admin").status_code, 401)

    def test_metrics_requires_admin(self) -> None:
        self.assertEqual(self.client.get("/metrics").status_code, 401)
        self.assertEqual(self.client.get("/metrics", headers=self.user_headers).status_code, 403)
        resp = self.client.get("/metrics", headers=self.admin_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "System metrics"})


if __name__ == "__main__":
    unittest.main()
