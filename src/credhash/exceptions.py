"""Credhash exceptions."""


class CredhashError(Exception):
    """Base exception for all credhash errors."""


class CryptoBackendError(CredhashError):
    """Raised when the random source or key-derivation primitive fails."""


class MalformedCredentialError(CredhashError):
    """Raised when a stored credential does not decode into a valid structure."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed credential: {reason}")


class ConfigError(CredhashError, ValueError):
    """Raised on invalid configuration."""
