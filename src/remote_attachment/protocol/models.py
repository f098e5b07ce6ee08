# FILE: src/remote_attachment/protocol/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional


# -------------------------
# CONTENT TYPES
# -------------------------

@dataclass(frozen=True)
class ContentTypeId:
    authority_id: str
    type_id: str
    version_major: int
    version_minor: int = 0

    def same_as(self, other: "ContentTypeId") -> bool:
        # minor versions are wire compatible
        return (
            self.authority_id == other.authority_id
            and self.type_id == other.type_id
            and self.version_major == other.version_major
        )

    @property
    def key(self) -> str:
        return f"{self.authority_id}/{self.type_id}:{self.version_major}"

    def __str__(self) -> str:
        return f"{self.authority_id}/{self.type_id}:{self.version_major}.{self.version_minor}"


@dataclass
class EncodedContent:
    type: ContentTypeId
    parameters: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    fallback: Optional[str] = None
    compression: Optional[str] = None


# -------------------------
# ENCRYPTION
# -------------------------

@dataclass
class Ciphertext:
    salt: bytes
    nonce: bytes
    payload: bytes


@dataclass
class EncryptedEncodedContent:
    """
    Sealed content, ready for upload.

    `payload` is what gets uploaded; `digest` is the SHA-256 of `payload`.
    The rest survives only inside the RemoteAttachment built from it.
    """

    digest: str
    salt: bytes
    nonce: bytes
    secret: bytes
    payload: bytes


# -------------------------
# ATTACHMENTS
# -------------------------

@dataclass
class RemoteAttachment:
    url: str
    content_digest: str
    salt: bytes
    nonce: bytes
    secret: bytes
    scheme: str
    content_length: int
    filename: str

    @classmethod
    def from_encrypted(
        cls,
        encrypted: EncryptedEncodedContent,
        *,
        url: str,
        filename: str,
        content_length: int,
        scheme: str = "https://",
    ) -> "RemoteAttachment":
        return cls(
            url=url,
            content_digest=encrypted.digest,
            salt=encrypted.salt,
            nonce=encrypted.nonce,
            secret=encrypted.secret,
            scheme=scheme,
            content_length=content_length,
            filename=filename,
        )


@dataclass
class Attachment:
    filename: str
    mime_type: str
    data: bytes
