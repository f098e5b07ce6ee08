from .codecs import (
    AttachmentCodec,
    ContentTypeAttachment,
    ContentTypeRemoteAttachment,
    ContentTypeText,
    RemoteAttachmentCodec,
    TextCodec,
    default_registry,
)
from .core.registry import CodecRegistry, NoCodecRegistry
from .protocol import (
    Attachment,
    CodecNotFoundError,
    ContentTypeId,
    DecryptionError,
    EncodedContent,
    EncryptedEncodedContent,
    EnvelopeError,
    FetchError,
    IntegrityError,
    KeyMaterialError,
    RemoteAttachment,
    RemoteAttachmentError,
    SchemeError,
)
from .security import digest_of, verify_digest

__all__ = [
    "AttachmentCodec",
    "ContentTypeAttachment",
    "ContentTypeRemoteAttachment",
    "ContentTypeText",
    "RemoteAttachmentCodec",
    "TextCodec",
    "default_registry",
    "CodecRegistry",
    "NoCodecRegistry",
    "Attachment",
    "CodecNotFoundError",
    "ContentTypeId",
    "DecryptionError",
    "EncodedContent",
    "EncryptedEncodedContent",
    "EnvelopeError",
    "FetchError",
    "IntegrityError",
    "KeyMaterialError",
    "RemoteAttachment",
    "RemoteAttachmentError",
    "SchemeError",
    "digest_of",
    "verify_digest",
]
