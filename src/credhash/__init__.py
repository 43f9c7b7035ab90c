"""Credhash — salted PBKDF2 password hashing with self-describing storage."""

from credhash.config import HasherConfig
from credhash.core.types import Algorithm, EncodedCredential
from credhash.exceptions import (
    ConfigError,
    CredhashError,
    CryptoBackendError,
    MalformedCredentialError,
)
from credhash.hasher import CredentialHasher, default_hasher, hash_password, verify_password
from credhash.models import UserCredentials

__version__ = "0.1.0"
__all__ = [
    "Algorithm",
    "ConfigError",
    "CredentialHasher",
    "CredhashError",
    "CryptoBackendError",
    "EncodedCredential",
    "HasherConfig",
    "MalformedCredentialError",
    "UserCredentials",
    "default_hasher",
    "hash_password",
    "verify_password",
]
