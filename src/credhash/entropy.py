"""Secure random sources and salt generation."""

from __future__ import annotations

import base64
import logging
import os
from typing import Protocol, runtime_checkable

from credhash.exceptions import CryptoBackendError

log = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Interface for cryptographically secure byte generators."""

    def random_bytes(self, n: int) -> bytes:
        """Return *n* unpredictable bytes."""
        ...


class OSRandomSource:
    """Reads from the operating system CSPRNG."""

    def random_bytes(self, n: int) -> bytes:
        return os.urandom(n)


def make_salt(length: int, source: RandomSource | None = None) -> str:
    """Return a *length*-character salt.

    The salt is the base64 text of *length* random bytes cut down to *length*
    characters, so it stays printable and round-trips through JSON untouched.
    """
    source = source or OSRandomSource()
    try:
        raw = source.random_bytes(length)
    except (OSError, NotImplementedError) as exc:
        log.exception("Random source failed while generating a %d-byte salt", length)
        raise CryptoBackendError(f"random source failed: {exc}") from exc
    if len(raw) != length:
        raise CryptoBackendError(
            f"random source returned {len(raw)} bytes, expected {length}"
        )
    return base64.b64encode(raw).decode("ascii")[:length]
