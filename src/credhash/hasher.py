"""Password hashing with salted, iterated PBKDF2 and self-describing output."""

from __future__ import annotations

import logging

from credhash.config import HasherConfig
from credhash.core.encoding import decode_credential, encode_credential
from credhash.core.kdf import derive_key, keys_match
from credhash.core.types import EncodedCredential
from credhash.entropy import OSRandomSource, RandomSource, make_salt
from credhash.exceptions import MalformedCredentialError

log = logging.getLogger(__name__)


class CredentialHasher:
    """Turns passwords into storable credentials and checks them later.

    >>> hasher = CredentialHasher()
    >>> stored = hasher.hash("correct horse")
    >>> hasher.verify("correct horse", stored)
    True

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(
        self,
        config: HasherConfig | None = None,
        *,
        random_source: RandomSource | None = None,
    ):
        self._config = config or HasherConfig()
        self._random = random_source or OSRandomSource()

    @property
    def config(self) -> HasherConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def hash(self, password: str) -> str:
        """Hash *password* with a fresh salt. Returns the encoded credential."""
        cfg = self._config
        salt = make_salt(cfg.salt_length, self._random)
        derived = derive_key(password, salt, cfg.iterations, cfg.key_length, cfg.algorithm)
        credential = EncodedCredential(
            salt=salt,
            iterations=cfg.iterations,
            key_length=cfg.key_length,
            derived_key=derived,
            algorithm=cfg.algorithm,
        )
        return encode_credential(credential)

    def verify(self, password: str, encoded: str) -> bool:
        """Check *password* against a stored credential.

        Uses the salt and cost parameters embedded in *encoded*. Raises
        :class:`MalformedCredentialError` if *encoded* cannot be decoded.
        """
        credential = self._decode(encoded)
        candidate = derive_key(
            password,
            credential.salt,
            credential.iterations,
            credential.key_length,
            credential.algorithm,
        )
        matched = keys_match(candidate, credential.derived_key)
        log.debug("Password verification %s", "succeeded" if matched else "failed")
        return matched

    def needs_rehash(self, encoded: str) -> bool:
        """Whether *encoded* was produced with parameters other than the current ones."""
        credential = self._decode(encoded)
        cfg = self._config
        return (
            credential.algorithm is not cfg.algorithm
            or credential.iterations != cfg.iterations
            or credential.key_length != cfg.key_length
            or len(credential.salt) != cfg.salt_length
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(encoded: str) -> EncodedCredential:
        try:
            return decode_credential(encoded)
        except MalformedCredentialError as exc:
            log.warning("Rejected stored credential: %s", exc.reason)
            raise


_default_hasher: CredentialHasher | None = None


def default_hasher() -> CredentialHasher:
    """Shared hasher with default configuration, created on first use."""
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = CredentialHasher()
    return _default_hasher


def hash_password(password: str) -> str:
    """Hash a password with the default cost parameters."""
    return default_hasher().hash(password)


def verify_password(password: str, encoded: str) -> bool:
    """Verify a password against a stored credential."""
    return default_hasher().verify(password, encoded)
