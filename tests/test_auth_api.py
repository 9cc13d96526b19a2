"""API tests for /api/auth: register, login, verify and token handling."""

import unittest
from datetime import timedelta

from storerate.core.security import create_access_token, decode_access_token
from storerate.models import User
from tests.support import PASSWORD, ApiTestCase

REGISTER_BODY = {
    "name": "Alexandra Catherine Smith",
    "email": "Alex@StoreRate.io",
    "address": "12 Orchard Lane, Riverton",
    "password": "Secret#123",
}


class TestRegister(ApiTestCase):
    def test_register_then_login_returns_token_with_normal_role(self) -> None:
        resp = self.client.post("/api/auth/register", json=REGISTER_BODY)
        self.assertEqual(resp.status_code, 201, resp.text)
        data = resp.json()
        self.assertEqual(data["user"]["role"], "normal")
        self.assertEqual(data["user"]["email"], "alex@storerate.io")
        self.assertNotIn("password_hash", data["user"])

        login = self.client.post(
            "/api/auth/login",
            json={"email": "alex@storerate.io", "password": "Secret#123"},
        )
        self.assertEqual(login.status_code, 200, login.text)
        payload = decode_access_token(login.json()["access_token"])
        self.assertEqual(payload["role"], "normal")
        self.assertEqual(payload["sub"], str(data["user"]["id"]))

    def test_register_ignores_requested_role(self) -> None:
        resp = self.client.post("/api/auth/register", json={**REGISTER_BODY, "role": "admin"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["user"]["role"], "normal")

    def test_duplicate_email_is_conflict(self) -> None:
        self.assertEqual(self.client.post("/api/auth/register", json=REGISTER_BODY).status_code, 201)
        resp = self.client.post(
            "/api/auth/register",
            json={**REGISTER_BODY, "email": "ALEX@storerate.io"},
        )
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(self.db.query(User).count(), 1)

    def test_field_errors_are_400_with_field_names(self) -> None:
        resp = self.client.post(
            "/api/auth/register",
            json={**REGISTER_BODY, "name": "Too short", "password": "password"},
        )
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["detail"], "Validation failed")
        fields = {e["field"] for e in body["errors"]}
        self.assertEqual(fields, {"name", "password"})
        self.assertEqual(self.db.query(User).count(), 0)

    def test_address_too_long(self) -> None:
        resp = self.client.post(
            "/api/auth/register", json={**REGISTER_BODY, "address": "a" * 401}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"][0]["field"], "address")

    def test_malformed_json_is_400(self) -> None:
        resp = self.client.post(
            "/api/auth/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)


class TestLogin(ApiTestCase):
    def test_wrong_password_and_unknown_email_look_the_same(self) -> None:
        self.make_user(email="known@storerate.io")
        bad_pw = self.client.post(
            "/api/auth/login", json={"email": "known@storerate.io", "password": "Wrong#123"}
        )
        unknown = self.client.post(
            "/api/auth/login", json={"email": "nobody@storerate.io", "password": PASSWORD}
        )
        self.assertEqual(bad_pw.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(bad_pw.json()["detail"], unknown.json()["detail"])
        self.assertEqual(bad_pw.headers.get("WWW-Authenticate"), "Bearer")

    def test_login_email_is_case_insensitive(self) -> None:
        self.make_user(email="owner@storerate.io", role="store_owner")
        resp = self.client.post(
            "/api/auth/login", json={"email": "Owner@StoreRate.io", "password": PASSWORD}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["role"], "store_owner")
        self.assertEqual(resp.json()["token_type"], "bearer")


class TestVerify(ApiTestCase):
    def test_valid_token(self) -> None:
        user = self.make_user(role="admin")
        resp = self.client.get("/api/auth/verify", headers=self.auth(user))
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["valid"])
        self.assertEqual(resp.json()["user"]["id"], user.id)

    def test_missing_token(self) -> None:
        resp = self.client.get("/api/auth/verify")
        self.assertEqual(resp.status_code, 401)

    def test_expired_token(self) -> None:
        user = self.make_user()
        token = create_access_token(sub=user.id, role=user.role, expires_delta=timedelta(minutes=-1))
        resp = self.client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Invalid or expired token")

    def test_malformed_token(self) -> None:
        resp = self.client.get("/api/auth/verify", headers={"Authorization": "Bearer abc.def"})
        self.assertEqual(resp.status_code, 401)

    def test_token_for_deleted_user(self) -> None:
        token = create_access_token(sub=999, role="admin")
        resp = self.client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 401)

    def test_non_numeric_subject(self) -> None:
        token = create_access_token(sub="alice", role="admin")
        resp = self.client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 401)


class TestHealthAndRoot(ApiTestCase):
    def test_health_reports_database(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")
        self.assertEqual(resp.json()["database"], "connected")

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "StoreRate API"})


if __name__ == "__main__":
    unittest.main()
