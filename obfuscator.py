"""
Field obfuscation for sensitive vault values.

This is NOT encryption. A repeating-key XOR followed by base64 keeps
passwords and private notes from showing up in a casual grep of the database
file, nothing more. Anyone holding the key (it ships in config) or willing to
brute-force a short XOR key can read every value back.

The transform is deterministic: the same plaintext under the same key always
produces the same stored text, so equal secrets are visibly equal at rest.

To get real confidentiality, swap in an authenticated cipher behind the same
obscure/reveal interface; callers in db_stores.py do not need to change.
"""

from __future__ import annotations

import base64
import binascii
from itertools import cycle

from errors import DecodeError, ValidationError

DEFAULT_KEY = b"\x42"


def _xor(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


def obscure(plaintext: str, key: bytes = DEFAULT_KEY) -> str:
    """XOR the UTF-8 bytes of ``plaintext`` with ``key`` and base64 the result."""
    if not plaintext:
        return ""
    return base64.b64encode(_xor(plaintext.encode("utf-8"), key)).decode("ascii")


def reveal(stored: str, key: bytes = DEFAULT_KEY) -> str:
    """Inverse of :func:`obscure`.

    Trailing padding may be omitted, but padding that is present must be
    exactly what the encoder would have written. Raises DecodeError for
    characters outside the base64 alphabet, for lengths or padding no
    encoder could have produced, and for XOR output that is not valid UTF-8.
    """
    body = stored.rstrip("=")
    pad = len(stored) - len(body)
    if not body:
        if pad:
            raise DecodeError("Encoded value is only padding")
        return ""
    if "=" in body:
        raise DecodeError("Padding found inside encoded value")
    if len(body) % 4 == 1:
        raise DecodeError("Encoded value has an impossible length")
    if pad and pad != -len(body) % 4:
        raise DecodeError("Padding does not match encoded length")
    try:
        raw = base64.b64decode(body + "=" * (-len(body) % 4), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 data: {e}") from e
    try:
        return _xor(raw, key).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Decoded bytes are not valid UTF-8") from e


class Obfuscator:
    """Holds the process-wide key and applies obscure/reveal with it."""

    def __init__(self, key: bytes | str = DEFAULT_KEY):
        if isinstance(key, str):
            key = key.encode("utf-8")
        if not key:
            raise ValidationError("Obfuscation key cannot be empty")
        self._key = key

    @classmethod
    def from_config(cls, config) -> "Obfuscator":
        return cls(config.get("OBFUSCATION_KEY", DEFAULT_KEY))

    def obscure(self, plaintext: str) -> str:
        return obscure(plaintext, self._key)

    def reveal(self, stored: str) -> str:
        return reveal(stored, self._key)
