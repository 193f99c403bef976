"""Fixtures building services wired to the testing configuration."""

from __future__ import annotations

from datetime import timedelta

import pytest
from storefront.infra.jwt.pyjwt_token_provider import PyJWTTokenProvider
from storefront.services import NotificationService, TokenConfig, TokenService

from tests.helpers.auth import ACCESS_SECRET, REFRESH_SECRET


@pytest.fixture()
def token_config() -> TokenConfig:
    return TokenConfig(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
        access_expires=timedelta(hours=1),
        refresh_expires=timedelta(days=30),
    )


@pytest.fixture()
def tokens(token_config) -> TokenService:
    return TokenService(provider=PyJWTTokenProvider(), config=token_config)


@pytest.fixture()
def notifications(mailer) -> NotificationService:
    return NotificationService(mailer=mailer, sender='"Shop" <info@example.com>')
