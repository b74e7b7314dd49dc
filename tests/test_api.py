"""HTTP-level tests: envelopes, bearer-token access, and the community/member flow."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app
from app.models.role import ROLE_COMMUNITY_ADMIN, ROLE_COMMUNITY_MEMBER
from app.services import identity
from tests.support import ApiTestCase


class TestAuthRoutes(ApiTestCase):
    """signup, signin and /auth/me."""

    def test_signup_returns_user_and_token(self) -> None:
        resp = self.client.post(
            "/v1/auth/signup",
            json={"name": "Ash Ketchum", "email": "ash@example.com", "password": "pikachu123"},
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertIs(body["status"], True)
        self.assertEqual(body["content"]["data"]["email"], "ash@example.com")
        self.assertNotIn("password_hash", body["content"]["data"])
        token = body["content"]["meta"]["access_token"]

        me = self.client.get("/v1/auth/me", headers=self.bearer(token))
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["content"]["data"]["id"], body["content"]["data"]["id"])

    def test_signup_duplicate_email(self) -> None:
        self.signup()
        resp = self.client.post(
            "/v1/auth/signup",
            json={"name": "Ash Again", "email": "ash@example.com", "password": "pikachu123"},
        )
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(
            resp.json(),
            {
                "status": False,
                "errors": [
                    {
                        "param": "email",
                        "message": "User with this email address already exists.",
                        "code": "RESOURCE_EXISTS",
                    }
                ],
            },
        )

    def test_signup_invalid_email(self) -> None:
        resp = self.client.post(
            "/v1/auth/signup",
            json={"name": "Ash", "email": "ash-at-example", "password": "pikachu123"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"][0]["code"], "INVALID_EMAIL")

    def test_missing_field_uses_error_envelope(self) -> None:
        resp = self.client.post("/v1/auth/signup", json={"name": "Ash", "password": "pikachu123"})
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertIs(body["status"], False)
        self.assertEqual(body["errors"][0]["param"], "email")
        self.assertEqual(body["errors"][0]["code"], "INVALID_INPUT")

    def test_signin(self) -> None:
        user_id, _ = self.signup()
        ok = self.client.post(
            "/v1/auth/signin", json={"email": "ash@example.com", "password": "pikachu123"}
        )
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.json()["content"]["data"]["id"], user_id)

        bad = self.client.post(
            "/v1/auth/signin", json={"email": "ash@example.com", "password": "charmander"}
        )
        self.assertEqual(bad.status_code, 401)
        self.assertEqual(bad.json()["errors"][0]["code"], "INVALID_CREDENTIALS")

    def test_me_returns_token_user_with_one_lookup(self) -> None:
        _, token = self.signup()
        with patch("app.services.identity.get_user", wraps=identity.get_user) as lookup:
            resp = self.client.get("/v1/auth/me", headers=self.bearer(token))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["content"]["data"]
        self.assertEqual(data["email"], "ash@example.com")
        self.assertIn("created_at", data)
        self.assertEqual(lookup.call_count, 1)

    def test_malformed_json_has_no_param(self) -> None:
        resp = self.client.post(
            "/v1/auth/signup",
            content=b'{"name": "Ash", ',
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        error = resp.json()["errors"][0]
        self.assertIsNone(error.get("param"))
        self.assertEqual(error["code"], "INVALID_INPUT")

    def test_password_over_72_bytes_rejected(self) -> None:
        resp = self.client.post(
            "/v1/auth/signup",
            json={"name": "Ash", "email": "ash@example.com", "password": "a" * 72 + "RIGHTPW1"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"][0]["param"], "password")

    def test_me_requires_token(self) -> None:
        resp = self.client.get("/v1/auth/me")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")
        self.assertEqual(resp.json()["errors"][0]["code"], "NOT_SIGNEDIN")

    def test_me_rejects_invalid_token(self) -> None:
        resp = self.client.get("/v1/auth/me", headers=self.bearer("not-a-token"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["errors"][0]["code"], "NOT_SIGNEDIN")


class TestRoleRoutes(ApiTestCase):
    def test_create_and_list(self) -> None:
        for name in (ROLE_COMMUNITY_ADMIN, ROLE_COMMUNITY_MEMBER):
            resp = self.client.post("/v1/role", json={"name": name})
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.json()["content"]["data"]["name"], name)

        listing = self.client.get("/v1/role").json()
        self.assertEqual(listing["content"]["meta"], {"total": 2, "pages": 1, "page": 1})
        self.assertEqual(len(listing["content"]["data"]), 2)

    def test_invalid_name(self) -> None:
        resp = self.client.post("/v1/role", json={"name": "Gym Leader"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"][0]["param"], "name")

    def test_invalid_page(self) -> None:
        resp = self.client.get("/v1/role", params={"page": 0})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"][0]["param"], "page")


class TestCommunityAndMemberFlow(ApiTestCase):
    """Owner creates a community, adds and removes members; others are refused."""

    def setUp(self) -> None:
        super().setUp()
        self.owner_id, self.owner_token = self.signup("Giovanni", "giovanni@rocket.org")
        self.other_id, self.other_token = self.signup("Archie", "archie@aqua.org")
        self.recruit_id, self.recruit_token = self.signup("Meowth", "meowth@rocket.org")
        resp = self.client.post("/v1/role", json={"name": ROLE_COMMUNITY_MEMBER})
        self.member_role_id = resp.json()["content"]["data"]["id"]

        resp = self.client.post(
            "/v1/community", json={"name": "Team Rocket"}, headers=self.bearer(self.owner_token)
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.community = resp.json()["content"]["data"]

    def _add_recruit(self, token: str):
        return self.client.post(
            "/v1/member",
            json={
                "communityId": self.community["id"],
                "userId": self.recruit_id,
                "roleId": self.member_role_id,
            },
            headers=self.bearer(token),
        )

    def test_create_requires_token(self) -> None:
        resp = self.client.post("/v1/community", json={"name": "Team Magma"})
        self.assertEqual(resp.status_code, 401)

    def test_created_community(self) -> None:
        self.assertEqual(self.community["slug"], "team-rocket")
        self.assertEqual(self.community["owner"], self.owner_id)

    def test_owner_is_admin_member(self) -> None:
        resp = self.client.get(f"/v1/community/{self.community['id']}/members")
        data = resp.json()["content"]["data"]
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["user"], {"id": self.owner_id, "name": "Giovanni"})
        self.assertEqual(data[0]["role"]["name"], ROLE_COMMUNITY_ADMIN)

    def test_list_with_owner_summary(self) -> None:
        body = self.client.get("/v1/community").json()
        self.assertEqual(body["content"]["meta"], {"total": 1, "pages": 1, "page": 1})
        self.assertEqual(
            body["content"]["data"][0]["owner"], {"id": self.owner_id, "name": "Giovanni"}
        )

    def test_owned_and_joined(self) -> None:
        owned = self.client.get("/v1/community/me/owner", headers=self.bearer(self.owner_token))
        self.assertEqual([c["id"] for c in owned.json()["content"]["data"]], [self.community["id"]])

        self.assertEqual(self._add_recruit(self.owner_token).status_code, 200)
        joined = self.client.get(
            "/v1/community/me/member", headers=self.bearer(self.recruit_token)
        ).json()
        self.assertEqual([c["id"] for c in joined["content"]["data"]], [self.community["id"]])
        none_owned = self.client.get(
            "/v1/community/me/owner", headers=self.bearer(self.recruit_token)
        ).json()
        self.assertEqual(none_owned["content"]["data"], [])

    def test_add_member_by_owner(self) -> None:
        resp = self._add_recruit(self.owner_token)
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["content"]["data"]
        self.assertEqual(
            (data["community"], data["user"], data["role"]),
            (self.community["id"], self.recruit_id, self.member_role_id),
        )

    def test_add_member_by_non_owner(self) -> None:
        resp = self._add_recruit(self.other_token)
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["errors"][0]["code"], "NOT_ALLOWED_ACCESS")

    def test_add_member_twice(self) -> None:
        self._add_recruit(self.owner_token)
        resp = self._add_recruit(self.owner_token)
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["errors"][0]["code"], "RESOURCE_EXISTS")

    def test_remove_member(self) -> None:
        member_id = self._add_recruit(self.owner_token).json()["content"]["data"]["id"]

        denied = self.client.delete(f"/v1/member/{member_id}", headers=self.bearer(self.other_token))
        self.assertEqual(denied.status_code, 403)

        resp = self.client.delete(f"/v1/member/{member_id}", headers=self.bearer(self.owner_token))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": True, "content": {"data": None}})

        again = self.client.delete(f"/v1/member/{member_id}", headers=self.bearer(self.owner_token))
        self.assertEqual(again.status_code, 404)
        self.assertEqual(again.json()["errors"][0]["code"], "RESOURCE_NOT_FOUND")

    def test_members_of_unknown_community(self) -> None:
        resp = self.client.get("/v1/community/9999/members")
        self.assertEqual(resp.status_code, 404)


class TestErrorEnvelopes(ApiTestCase):
    """Unknown routes and unexpected failures use the same error envelope."""

    def test_unknown_route(self) -> None:
        resp = self.client.get("/v1/nowhere")
        self.assertEqual(resp.status_code, 404)
        self.assertIs(resp.json()["status"], False)

    def test_wrong_method(self) -> None:
        resp = self.client.put("/v1/role", json={"name": ROLE_COMMUNITY_ADMIN})
        self.assertEqual(resp.status_code, 405)
        body = resp.json()
        self.assertIs(body["status"], False)
        self.assertEqual(body["errors"][0]["code"], "METHOD_NOT_ALLOWED")

    def test_unexpected_failure_is_generic_500(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        with patch(
            "app.services.communities.list_communities",
            side_effect=RuntimeError("relation communities does not exist"),
        ):
            resp = client.get("/v1/community")
        self.assertEqual(resp.status_code, 500)
        body = resp.json()
        self.assertEqual(body["status"], False)
        self.assertEqual(body["errors"][0]["code"], "INTERNAL_ERROR")
        self.assertNotIn("relation", resp.text)

    def test_health(self) -> None:
        resp = self.client.get("/v1/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["database"], "connected")


if __name__ == "__main__":
    unittest.main()
