# tests/integration/test_api_auth.py
from __future__ import annotations

import pytest
from storefront.models.user import User

from tests.factories.user import DEFAULT_PASSWORD, UserFactory
from tests.helpers.auth import bearer, forge_token


def _register(client, email="ada@example.com", password="s3cret", name="Ada"):
    return client.post("/register", json={"name": name, "email": email, "password": password})


# ------------------------------ register / login ------------------------------


def test_register_returns_session(client):
    resp = _register(client)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "User registered successfully"
    assert set(body) == {"message", "user", "token", "refreshToken"}
    assert body["user"]["email"] == "ada@example.com"
    assert len(body["user"]["_id"]) == 32
    assert "password" not in body["user"]


def test_register_duplicate_is_400(client):
    _register(client)

    resp = _register(client, email="ADA@example.com")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "User already exists"


@pytest.mark.parametrize(
    "payload",
    [{}, {"name": "A", "email": "not-an-email", "password": "x"}, {"name": "A", "email": "a@b.co"}],
)
def test_register_validation(client, payload):
    resp = client.post("/register", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["code"] == "validation_error"
    assert resp.mimetype == "application/problem+json"


def test_login(client):
    user = UserFactory()

    resp = client.post("/login", json={"email": user.email, "password": DEFAULT_PASSWORD})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Login successful"
    assert body["user"]["_id"] == user.id
    assert body["token"] and body["refreshToken"]


def test_login_bad_password(client):
    user = UserFactory()

    resp = client.post("/login", json={"email": user.email, "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid credentials"


# ------------------------------ passwords ------------------------------


def test_change_password_flow(client):
    user = UserFactory(password="old")
    payload = {"email": user.email, "oldPassword": "old", "newPassword": "new"}

    resp = client.post("/change-password", json=payload)
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Password changed successfully"}

    resp = client.post("/change-password", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Incorrect old password"

    resp = client.post("/login", json={"email": user.email, "password": "new"})
    assert resp.status_code == 200


def test_change_password_unknown_user(client):
    resp = client.post(
        "/change-password",
        json={"email": "ghost@example.com", "oldPassword": "a", "newPassword": "b"},
    )

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User not found"


def test_password_reset_round_trip(client, mailer, session):
    user = UserFactory(password="old")

    resp = client.post("/request-password-reset", json={"email": user.email})
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Password reset link sent to your email."}

    token = session.get(User, user.id).reset_token
    [message] = mailer.sent_to(user.email)
    assert message.text.endswith(f"/reset-password/{token}")

    resp = client.post("/reset-password", json={"token": token, "password": "fresh"})
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Password has been reset successfully"}

    resp = client.post("/reset-password", json={"token": token, "password": "again"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid or expired token"

    assert client.post("/login", json={"email": user.email, "password": "fresh"}).status_code == 200


def test_password_reset_unknown_email(client, mailer):
    resp = client.post("/request-password-reset", json={"email": "ghost@example.com"})

    assert resp.status_code == 404
    assert mailer.outbox == []


def test_password_reset_mail_failure_is_500(client, mailer):
    from storefront.services._shared.ports.mailer import MailTransportError

    user = UserFactory()
    mailer.fail_with = MailTransportError("smtp down")

    resp = client.post("/request-password-reset", json={"email": user.email})

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Failed to send password reset email."


# ------------------------------ tokens ------------------------------


def test_refresh_token_rotation(client):
    first = _register(client).get_json()

    resp = client.post("/refresh-token", json={"refreshToken": first["refreshToken"]})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["user"]["_id"] == first["user"]["_id"]
    assert body["refreshToken"] != first["refreshToken"]

    resp = client.post("/refresh-token", json={"refreshToken": first["refreshToken"]})
    assert resp.status_code == 403
    assert resp.get_json()["message"] == "Invalid refresh token"


def test_refresh_token_missing(client):
    resp = client.post("/refresh-token", json={})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "No refresh token provided"


def test_verify_session(client, app):
    token = _register(client).get_json()["token"]

    resp = client.get("/auth/verify-session", headers=bearer(token))
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Token is valid"}

    assert client.get("/auth/verify-session").status_code == 401

    expired = forge_token("a" * 32, app.config["JWT_ACCESS_SECRET"], minutes=-1)
    resp = client.get("/auth/verify-session", headers=bearer(expired))
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid or expired token"


# ------------------------------ users ------------------------------


def test_user_details(client):
    body = _register(client, name="Grace", email="grace@example.com").get_json()

    resp = client.get("/user/details", headers=bearer(body["token"]))

    assert resp.status_code == 200
    assert resp.get_json() == {
        "userId": body["user"]["_id"],
        "name": "Grace",
        "email": "grace@example.com",
    }


def test_user_details_requires_token(client):
    assert client.get("/user/details").status_code == 401


def test_get_user_by_id(client):
    user = UserFactory(name="Linus")

    resp = client.get(f"/users/{user.id}")

    assert resp.status_code == 200
    assert resp.get_json() == {"_id": user.id, "name": "Linus", "email": user.email}
    assert client.get(f"/users/{'0' * 32}").status_code == 404


@pytest.mark.parametrize("name", ["   ", "\t\n"])
def test_register_blank_name_is_validation_error(client, name):
    resp = client.post("/register", json={"name": name, "email": "a@x.com", "password": "pw"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"]["name"] == ["Name is required."]
