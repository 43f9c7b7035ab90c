"""Text form of an encoded credential.

A stored credential is a JSON array with its brackets stripped::

    "<salt>",<iterations>,<key_length>,"<derived_key>"

Credentials using anything other than PBKDF2-HMAC-SHA1 carry a leading
algorithm tag::

    "pbkdf2-sha256","<salt>",<iterations>,<key_length>,"<derived_key>"
"""

from __future__ import annotations

import json
from typing import Any

from credhash.core.types import Algorithm, EncodedCredential
from credhash.exceptions import MalformedCredentialError

_SEPARATORS = (",", ":")


def encode_credential(credential: EncodedCredential) -> str:
    """Serialize *credential* to its storable text."""
    fields: list[Any] = [
        credential.salt,
        credential.iterations,
        credential.key_length,
        credential.derived_key,
    ]
    if not credential.is_legacy:
        fields.insert(0, credential.algorithm.value)
    return json.dumps(fields, separators=_SEPARATORS)[1:-1]


def decode_credential(text: str) -> EncodedCredential:
    """Parse stored text back into an :class:`EncodedCredential`.

    Raises :class:`MalformedCredentialError` for anything that is not exactly
    the legacy 4-field form or the tagged 5-field form.
    """
    if not isinstance(text, str):
        raise MalformedCredentialError(f"expected text, got {type(text).__name__}")
    try:
        data = json.loads(f"[{text}]")
    except ValueError as exc:
        raise MalformedCredentialError("not a JSON value sequence") from exc

    algorithm = Algorithm.pbkdf2_sha1
    if len(data) == 5:
        tag = data.pop(0)
        try:
            algorithm = Algorithm(tag)
        except ValueError:
            raise MalformedCredentialError(f"unknown algorithm tag {tag!r}") from None
        if algorithm is Algorithm.pbkdf2_sha1:
            # sha1 is always written untagged
            raise MalformedCredentialError("legacy algorithm must not be tagged")
    elif len(data) != 4:
        raise MalformedCredentialError(f"expected 4 fields, got {len(data)}")

    salt, iterations, key_length, derived_key = data
    if not isinstance(salt, str):
        raise MalformedCredentialError("salt must be a string")
    if not _is_positive_int(iterations):
        raise MalformedCredentialError("iterations must be a positive integer")
    if not _is_positive_int(key_length):
        raise MalformedCredentialError("key length must be a positive integer")
    if not isinstance(derived_key, str):
        raise MalformedCredentialError("derived key must be a string")

    return EncodedCredential(
        salt=salt,
        iterations=iterations,
        key_length=key_length,
        derived_key=derived_key,
        algorithm=algorithm,
    )


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a cost parameter
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
