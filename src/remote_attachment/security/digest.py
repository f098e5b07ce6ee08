"""
Content digests.

The digest always covers the ciphertext that gets uploaded, so a fetched
payload can be checked before any decryption is attempted.
"""

from __future__ import annotations

import hashlib
import hmac


def digest_of(data: bytes) -> str:
    """Lowercase hex SHA-256 of `data`."""
    return hashlib.sha256(data).hexdigest()


def _normalize_hex(value: str) -> str:
    value = value.strip().lower()
    if value.startswith("0x"):
        value = value[2:]
    return value


def verify_digest(data: bytes, expected: str) -> bool:
    if not isinstance(expected, str) or not expected.isascii():
        return False
    return hmac.compare_digest(digest_of(data), _normalize_hex(expected))
