"""
AES-256-GCM / HKDF-SHA256 cipher
--------------------------------

Authenticated encryption used to seal remote attachment payloads.

- 32-byte one-time secret supplied by the caller
- 32-byte random salt, HKDF-SHA256(secret, salt, info=b"") -> 256-bit key
- 96-bit random nonce (recommended for GCM)
- GCM tag appended to the payload
"""

from __future__ import annotations
import os
from typing import Optional, Protocol

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from remote_attachment.protocol.errors import DecryptionError
from remote_attachment.protocol.models import Ciphertext

SALT_LENGTH = 32
NONCE_LENGTH = 12
KEY_LENGTH = 32


class Cipher(Protocol):
    """Authenticated-encryption primitive consumed by the sealer and loader."""

    def encrypt(self, plaintext: bytes, secret: bytes, aad: Optional[bytes] = None) -> Ciphertext:
        ...

    def decrypt(self, ciphertext: Ciphertext, secret: bytes, aad: Optional[bytes] = None) -> bytes:
        ...


class AESGCMHKDFCipher:
    """
    AES-256-GCM with a per-message key derived from the secret by HKDF.
    Provides:
    - Confidentiality
    - Integrity (GCM tag)
    """

    def __init__(self, info: bytes = b""):
        self._info = info

    # --- Key Derivation ----------------------------------------------

    def _derive_key(self, secret: bytes, salt: bytes) -> bytes:
        hkdf = HKDF(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=salt,
            info=self._info,
        )
        return hkdf.derive(secret)

    # --- Encrypt -----------------------------------------------------

    def encrypt(self, plaintext: bytes, secret: bytes, aad: Optional[bytes] = None) -> Ciphertext:
        salt = os.urandom(SALT_LENGTH)
        nonce = os.urandom(NONCE_LENGTH)

        key = self._derive_key(secret, salt)
        payload = AESGCM(key).encrypt(nonce, plaintext, aad)

        return Ciphertext(salt=salt, nonce=nonce, payload=payload)

    # --- Decrypt -----------------------------------------------------

    def decrypt(self, ciphertext: Ciphertext, secret: bytes, aad: Optional[bytes] = None) -> bytes:
        if len(ciphertext.nonce) != NONCE_LENGTH:
            raise DecryptionError(f"nonce must be {NONCE_LENGTH} bytes, got {len(ciphertext.nonce)}")

        key = self._derive_key(secret, ciphertext.salt)

        try:
            return AESGCM(key).decrypt(ciphertext.nonce, ciphertext.payload, aad)
        except InvalidTag as e:
            raise DecryptionError("AES-GCM decryption failed: authentication tag mismatch") from e


default_cipher = AESGCMHKDFCipher()
