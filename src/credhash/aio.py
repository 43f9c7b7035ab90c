"""Async wrappers that move hashing off the event loop."""

from __future__ import annotations

import asyncio

from credhash.hasher import CredentialHasher, default_hasher


async def hash_async(
    password: str,
    *,
    hasher: CredentialHasher | None = None,
    limiter: asyncio.Semaphore | None = None,
) -> str:
    """Run :meth:`CredentialHasher.hash` in a worker thread.

    *limiter* bounds how many derivations the caller lets run at once.
    """
    hasher = hasher or default_hasher()
    if limiter is None:
        return await asyncio.to_thread(hasher.hash, password)
    async with limiter:
        return await asyncio.to_thread(hasher.hash, password)


async def verify_async(
    password: str,
    encoded: str,
    *,
    hasher: CredentialHasher | None = None,
    limiter: asyncio.Semaphore | None = None,
) -> bool:
    """Run :meth:`CredentialHasher.verify` in a worker thread."""
    hasher = hasher or default_hasher()
    if limiter is None:
        return await asyncio.to_thread(hasher.verify, password, encoded)
    async with limiter:
        return await asyncio.to_thread(hasher.verify, password, encoded)
