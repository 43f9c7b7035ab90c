"""PBKDF2-HMAC key derivation and constant-time key comparison."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging

from credhash.core.types import Algorithm
from credhash.exceptions import CryptoBackendError

log = logging.getLogger(__name__)


def derive_key(
    password: str,
    salt: str,
    iterations: int,
    key_length: int,
    algorithm: Algorithm = Algorithm.pbkdf2_sha1,
) -> str:
    """Stretch *password* and return the derived key as base64 text.

    *salt* is used as its UTF-8 bytes, exactly as stored. Unpaired surrogates
    in *password* are encoded as U+FFFD.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")
    secret = password_bytes(password)
    try:
        dk = hashlib.pbkdf2_hmac(
            algorithm.digest,
            secret,
            salt.encode("utf-8", "surrogatepass"),
            iterations,
            dklen=key_length,
        )
    except (ValueError, OverflowError) as exc:
        log.exception(
            "Key derivation failed (algorithm=%s, iterations=%d, key_length=%d)",
            algorithm.value,
            iterations,
            key_length,
        )
        raise CryptoBackendError(f"{algorithm.value} derivation failed: {exc}") from exc
    return base64.b64encode(dk).decode("ascii")


def password_bytes(password: str) -> bytes:
    """UTF-8 bytes of *password*, with each unpaired surrogate as U+FFFD."""
    # the utf-16 round trip joins split surrogate pairs and replaces lone ones
    utf16 = password.encode("utf-16-le", "surrogatepass")
    return utf16.decode("utf-16-le", "replace").encode("utf-8")


def keys_match(candidate: str, stored: str) -> bool:
    """Compare two base64 keys in time independent of where they differ."""
    return hmac.compare_digest(
        candidate.encode("utf-8"), stored.encode("utf-8", "surrogatepass")
    )
