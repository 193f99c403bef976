# comments in English; reST docstrings strict
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Sanitized user view returned by every account endpoint.

    Credential material (password hash, reset and refresh tokens) is never
    part of this contract.

    :param id: Opaque user identifier.
    :type id: str
    :param name: Display name.
    :type name: str
    :param email: Normalized email address.
    :type email: str
    """

    id: str
    name: str
    email: str

    @classmethod
    def from_model(cls, user) -> "UserPublicOut":
        return cls(id=user.id, name=user.name, email=user.email)
