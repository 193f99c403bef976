# storefront/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

from storefront.services._shared.dto import UserPublicOut

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for account registration.

    :param name: Display name.
    :type name: str
    :param email: Email (normalized before lookup and storage).
    :type email: str
    :param password: Raw password (hashed by the model setter).
    :type password: str
    """

    name: str
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class PasswordChangeIn:
    """
    Input DTO for changing a known password.

    :param email: Account email.
    :type email: str
    :param old_password: Current password.
    :type old_password: str
    :param new_password: Replacement password.
    :type new_password: str
    """

    email: str
    old_password: str
    new_password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthResultOut:
    """
    Output DTO for register / login / refresh.

    :param user: Sanitized user view.
    :type user: UserPublicOut
    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT (also stored on the user).
    :type refresh_token: str
    """

    user: UserPublicOut
    access_token: str
    refresh_token: str
