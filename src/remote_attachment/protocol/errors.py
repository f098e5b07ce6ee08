from typing import Optional
from .enums import ErrorCode


class RemoteAttachmentError(Exception):
    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class FetchError(RemoteAttachmentError):
    """Raised when the ciphertext cannot be fetched or the body is empty."""

    code = ErrorCode.FETCH_ERROR


class IntegrityError(RemoteAttachmentError):
    """Raised when the fetched payload does not match the declared digest."""

    code = ErrorCode.INTEGRITY_ERROR


class EnvelopeError(RemoteAttachmentError):
    """Raised when an encoded content envelope is missing or malformed."""

    code = ErrorCode.ENVELOPE_ERROR


class DecryptionError(EnvelopeError):
    """Raised when a verified payload fails authenticated decryption."""

    code = ErrorCode.DECRYPTION_ERROR


class CodecNotFoundError(RemoteAttachmentError):
    """Raised when no codec is registered for a content type."""

    code = ErrorCode.CODEC_NOT_FOUND


class SchemeError(RemoteAttachmentError):
    """Raised when a remote attachment URL does not use https."""

    code = ErrorCode.SCHEME_ERROR


class KeyMaterialError(RemoteAttachmentError):
    """Raised when the cipher does not return salt, nonce and payload."""

    code = ErrorCode.KEY_MATERIAL_ERROR
