"""Core Pydantic models for credhash."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Algorithm(str, Enum):
    """Supported key-derivation families."""

    pbkdf2_sha1 = "pbkdf2-sha1"
    pbkdf2_sha256 = "pbkdf2-sha256"

    @property
    def digest(self) -> str:
        """Name of the HMAC digest as understood by ``hashlib``."""
        return self.value.split("-", 1)[1]


class EncodedCredential(BaseModel):
    """The decoded form of a stored password hash.

    ``salt`` is kept as text: the UTF-8 bytes of this string are what the
    derivation function receives, not a base64 decoding of it.
    """

    model_config = ConfigDict(frozen=True)

    salt: str
    iterations: int = Field(ge=1)
    key_length: int = Field(ge=1)
    derived_key: str
    algorithm: Algorithm = Algorithm.pbkdf2_sha1

    @property
    def is_legacy(self) -> bool:
        """True when this credential serializes to the untagged 4-field form."""
        return self.algorithm is Algorithm.pbkdf2_sha1
