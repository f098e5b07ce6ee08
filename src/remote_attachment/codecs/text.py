from __future__ import annotations

from typing import Optional

from remote_attachment.core.registry import CodecLookup
from remote_attachment.protocol.errors import EnvelopeError
from remote_attachment.protocol.models import ContentTypeId, EncodedContent

ContentTypeText = ContentTypeId(
    authority_id="xmtp.org",
    type_id="text",
    version_major=1,
    version_minor=0,
)

_ENCODING = "UTF-8"


class TextCodec:
    @property
    def content_type(self) -> ContentTypeId:
        return ContentTypeText

    def encode(self, content: str, registry: CodecLookup) -> EncodedContent:
        return EncodedContent(
            type=ContentTypeText,
            parameters={"encoding": _ENCODING},
            content=content.encode("utf-8"),
        )

    def decode(self, encoded: EncodedContent, registry: CodecLookup) -> str:
        encoding = encoded.parameters.get("encoding", _ENCODING)
        if encoding.upper() != _ENCODING:
            raise EnvelopeError(f"unrecognized encoding {encoding}")
        try:
            return encoded.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EnvelopeError("text content is not valid UTF-8") from e

    def fallback(self, content: str) -> Optional[str]:
        return None
