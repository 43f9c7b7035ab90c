"""Credential model, text encoding and key derivation."""

from credhash.core.encoding import decode_credential, encode_credential
from credhash.core.kdf import derive_key, keys_match
from credhash.core.types import Algorithm, EncodedCredential

__all__ = [
    "Algorithm",
    "EncodedCredential",
    "decode_credential",
    "derive_key",
    "encode_credential",
    "keys_match",
]
