"""Credhash configuration."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from credhash.core.types import Algorithm
from credhash.exceptions import ConfigError

log = logging.getLogger(__name__)

DEFAULT_SALT_LENGTH = 16
DEFAULT_ITERATIONS = 10_000
DEFAULT_KEY_LENGTH = 30

_ENV_PREFIX = "CREDHASH_"
_ENV_FIELDS = ("salt_length", "iterations", "key_length", "algorithm")


class HasherConfig(BaseModel):
    """Cost parameters applied when hashing new passwords.

    Verification never reads these; it uses the values stored in the
    credential being checked.
    """

    model_config = ConfigDict(frozen=True)

    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=1, le=1024)
    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=1)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=1)
    algorithm: Algorithm = Algorithm.pbkdf2_sha1

    def model_post_init(self, __context: Any) -> None:
        if self.iterations < DEFAULT_ITERATIONS:
            log.warning(
                "HasherConfig.iterations=%d is below the safe default of %d",
                self.iterations,
                DEFAULT_ITERATIONS,
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HasherConfig:
        """Build a config from ``CREDHASH_*`` environment variables."""
        env = os.environ if environ is None else environ
        values = {
            name: env[_ENV_PREFIX + name.upper()]
            for name in _ENV_FIELDS
            if env.get(_ENV_PREFIX + name.upper())
        }
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid credhash environment configuration: {exc}") from exc
