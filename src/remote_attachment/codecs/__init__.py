from remote_attachment.core.registry import CodecRegistry

from .text import TextCodec, ContentTypeText
from .attachment import AttachmentCodec, ContentTypeAttachment
from .remote_attachment import RemoteAttachmentCodec, ContentTypeRemoteAttachment


def default_registry() -> CodecRegistry:
    """Registry holding every content type this package knows."""
    return CodecRegistry([TextCodec(), AttachmentCodec(), RemoteAttachmentCodec()])


__all__ = [
    "TextCodec",
    "ContentTypeText",
    "AttachmentCodec",
    "ContentTypeAttachment",
    "RemoteAttachmentCodec",
    "ContentTypeRemoteAttachment",
    "default_registry",
]
