from __future__ import annotations

from typing import Optional

from remote_attachment.core.registry import CodecLookup
from remote_attachment.protocol.errors import EnvelopeError
from remote_attachment.protocol.models import Attachment, ContentTypeId, EncodedContent

ContentTypeAttachment = ContentTypeId(
    authority_id="xmtp.org",
    type_id="attachment",
    version_major=1,
    version_minor=0,
)


def attachment_fallback(filename: str) -> str:
    return f"Can’t display \"{filename}\". This app doesn’t support attachments."


class AttachmentCodec:
    """Inline attachment: file bytes carried directly in the content."""

    @property
    def content_type(self) -> ContentTypeId:
        return ContentTypeAttachment

    def encode(self, content: Attachment, registry: CodecLookup) -> EncodedContent:
        return EncodedContent(
            type=ContentTypeAttachment,
            parameters={
                "filename": content.filename,
                "mimeType": content.mime_type,
            },
            content=content.data,
            fallback=self.fallback(content),
        )

    def decode(self, encoded: EncodedContent, registry: CodecLookup) -> Attachment:
        try:
            filename = encoded.parameters["filename"]
            mime_type = encoded.parameters["mimeType"]
        except KeyError as e:
            raise EnvelopeError(f"attachment is missing parameter {e.args[0]!r}") from e

        return Attachment(filename=filename, mime_type=mime_type, data=encoded.content)

    def fallback(self, content: Attachment) -> Optional[str]:
        return attachment_fallback(content.filename)
