# tests/unit/services/test_token_service.py
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from storefront.infra.jwt.pyjwt_token_provider import PyJWTTokenProvider
from storefront.services import TokenConfig, TokenService
from storefront.services._shared.errors import TokenInvalidError

from tests.helpers.auth import ACCESS_SECRET, REFRESH_SECRET

USER_ID = "a" * 32


def test_access_token_claims(tokens):
    token = tokens.issue_access_token(USER_ID)
    payload = jwt.decode(token, ACCESS_SECRET, algorithms=["HS256"])

    assert payload["userId"] == USER_ID
    assert payload["sub"] == USER_ID
    assert payload["type"] == "access"
    assert payload["exp"] - payload["iat"] == 3600


def test_refresh_token_uses_distinct_secret_and_lifetime(tokens):
    token = tokens.issue_refresh_token(USER_ID)

    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(token, ACCESS_SECRET, algorithms=["HS256"])
    payload = jwt.decode(token, REFRESH_SECRET, algorithms=["HS256"])
    assert payload["type"] == "refresh"
    assert payload["exp"] - payload["iat"] == 30 * 24 * 3600


def test_verify_returns_typed_claim(tokens):
    claim = tokens.verify(tokens.issue_access_token(USER_ID), ACCESS_SECRET)

    assert claim.user_id == USER_ID
    assert claim.token_type == "access"
    assert claim.expires_at > datetime.now(UTC)
    assert claim.expires_at.tzinfo is not None


def test_tokens_issued_together_differ(tokens):
    assert tokens.issue_refresh_token(USER_ID) != tokens.issue_refresh_token(USER_ID)


@pytest.mark.parametrize("secret", ["wrong-secret", REFRESH_SECRET])
def test_bad_signature_is_token_invalid(tokens, secret):
    with pytest.raises(TokenInvalidError):
        tokens.verify(tokens.issue_access_token(USER_ID), secret)


def test_expired_token_is_token_invalid(token_config):
    past = datetime.now(UTC) - timedelta(hours=2)
    issuer = TokenService(provider=PyJWTTokenProvider(), config=token_config, clock=lambda: past)
    token = issuer.issue_access_token(USER_ID)

    with pytest.raises(TokenInvalidError):
        issuer.verify(token, ACCESS_SECRET)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_token_invalid(tokens, token):
    with pytest.raises(TokenInvalidError):
        tokens.verify_access(token)


def test_payload_without_user_is_token_invalid(tokens):
    token = jwt.encode({"exp": datetime.now(UTC) + timedelta(minutes=5)}, ACCESS_SECRET)
    with pytest.raises(TokenInvalidError):
        tokens.verify(token, ACCESS_SECRET)


def test_typed_wrappers_reject_swapped_tokens(tokens):
    with pytest.raises(TokenInvalidError):
        tokens.verify_access(tokens.issue_refresh_token(USER_ID))
    with pytest.raises(TokenInvalidError):
        tokens.verify_refresh(tokens.issue_access_token(USER_ID))
    assert tokens.verify_refresh(tokens.issue_refresh_token(USER_ID)).user_id == USER_ID


def test_config_requires_distinct_secrets():
    with pytest.raises(ValueError):
        TokenConfig(access_secret="same", refresh_secret="same")
    with pytest.raises(ValueError):
        TokenConfig(access_secret="", refresh_secret="x")
