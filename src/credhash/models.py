"""Caller-side user credential holder."""

from __future__ import annotations

from pydantic import BaseModel

from credhash.exceptions import MalformedCredentialError
from credhash.hasher import CredentialHasher, default_hasher


class UserCredentials(BaseModel):
    """The password-bearing part of a user record.

    Storage of the record is left to the caller; only ``encrypted_password``
    needs to be persisted.
    """

    username: str
    name: str | None = None
    encrypted_password: str | None = None

    def set_password(self, password: str, hasher: CredentialHasher | None = None) -> None:
        """Replace the stored credential with a freshly salted hash of *password*."""
        self.encrypted_password = (hasher or default_hasher()).hash(password)

    def check_password(self, password: str, hasher: CredentialHasher | None = None) -> bool:
        if self.encrypted_password is None:
            raise MalformedCredentialError(f"user {self.username!r} has no password set")
        return (hasher or default_hasher()).verify(password, self.encrypted_password)
