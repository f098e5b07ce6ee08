from .enums import ErrorCode
from .errors import (
    RemoteAttachmentError,
    FetchError,
    IntegrityError,
    EnvelopeError,
    DecryptionError,
    CodecNotFoundError,
    SchemeError,
    KeyMaterialError,
)
from .models import (
    ContentTypeId,
    EncodedContent,
    Ciphertext,
    EncryptedEncodedContent,
    RemoteAttachment,
    Attachment,
)

__all__ = [
    "ErrorCode",
    "RemoteAttachmentError",
    "FetchError",
    "IntegrityError",
    "EnvelopeError",
    "DecryptionError",
    "CodecNotFoundError",
    "SchemeError",
    "KeyMaterialError",
    "ContentTypeId",
    "EncodedContent",
    "Ciphertext",
    "EncryptedEncodedContent",
    "RemoteAttachment",
    "Attachment",
]
