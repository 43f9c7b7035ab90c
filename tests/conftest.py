"""Shared fixtures for credhash tests."""

from __future__ import annotations

import pytest

from credhash import CredentialHasher, HasherConfig


@pytest.fixture()
def hasher() -> CredentialHasher:
    return CredentialHasher()


@pytest.fixture()
def fast_hasher() -> CredentialHasher:
    return CredentialHasher(HasherConfig(iterations=100))
