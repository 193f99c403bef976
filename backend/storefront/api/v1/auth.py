"""Account and session endpoints (register, login, passwords, tokens)."""

from __future__ import annotations

from flask import Blueprint

from storefront.api.deps import (
    auth_gateway,
    bearer_token,
    json_body,
    json_response,
    password_reset_flow,
    timing,
)
from storefront.schemas import (
    ChangePasswordSchema,
    LoginSchema,
    PasswordResetRequestSchema,
    PasswordResetSchema,
    RefreshResponseSchema,
    RefreshSchema,
    RegisterSchema,
    SessionResponseSchema,
)
from storefront.services import (
    LoginIn,
    PasswordChangeIn,
    RegisterIn,
    ResetConsumeIn,
    ResetRequestIn,
)

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
change_password_schema = ChangePasswordSchema()
refresh_schema = RefreshSchema()
reset_request_schema = PasswordResetRequestSchema()
reset_schema = PasswordResetSchema()
session_schema = SessionResponseSchema()
refresh_response_schema = RefreshResponseSchema()


def _session_body(message: str, result) -> dict:
    return session_schema.dump(
        {
            "message": message,
            "user": result.user,
            "access_token": result.access_token,
            "refresh_token": result.refresh_token,
        }
    )


@bp.post("/register")
@timing
def register():
    """Create an account and return the user with a fresh token pair."""

    data = register_schema.load(json_body())
    result = auth_gateway().register(RegisterIn(**data))
    return json_response(_session_body("User registered successfully", result), status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue access and refresh tokens."""

    data = login_schema.load(json_body())
    result = auth_gateway().login(LoginIn(**data))
    return json_response(_session_body("Login successful", result))


@bp.post("/change-password")
@timing
def change_password():
    data = change_password_schema.load(json_body())
    auth_gateway().change_password(PasswordChangeIn(**data))
    return json_response({"message": "Password changed successfully"})


@bp.post("/refresh-token")
@timing
def refresh_token():
    """Rotate the refresh token presented in the body."""

    data = refresh_schema.load(json_body())
    result = auth_gateway().refresh(data["refresh_token"])
    body = refresh_response_schema.dump(
        {
            "user": result.user,
            "access_token": result.access_token,
            "refresh_token": result.refresh_token,
        }
    )
    return json_response(body)


@bp.get("/auth/verify-session")
@timing
def verify_session():
    auth_gateway().verify_session(bearer_token())
    return json_response({"message": "Token is valid"})


@bp.post("/request-password-reset")
@timing
def request_password_reset():
    """Mail a single-use reset link to the account email."""

    data = reset_request_schema.load(json_body())
    password_reset_flow().request_reset(ResetRequestIn(email=data["email"]))
    return json_response({"message": "Password reset link sent to your email."})


@bp.post("/reset-password")
@timing
def reset_password():
    data = reset_schema.load(json_body())
    password_reset_flow().consume_reset(
        ResetConsumeIn(token=data["token"], new_password=data["password"])
    )
    return json_response({"message": "Password has been reset successfully"})
