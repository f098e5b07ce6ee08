from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from ..protocol.models import ContentTypeId, EncodedContent


class CodecLookup(Protocol):
    def codec_for(self, content_type: ContentTypeId) -> Optional["ContentCodec"]:
        ...


class ContentCodec(Protocol):
    """Encodes one content type to an EncodedContent envelope and back."""

    @property
    def content_type(self) -> ContentTypeId:
        ...

    def encode(self, content: Any, registry: CodecLookup) -> EncodedContent:
        ...

    def decode(self, encoded: EncodedContent, registry: CodecLookup) -> Any:
        ...

    def fallback(self, content: Any) -> Optional[str]:
        ...


class CodecRegistry:
    """
    Maps (authority, type, major version) to the codec that handles it.
    """

    def __init__(self, codecs: Optional[List[ContentCodec]] = None) -> None:
        self._codecs: Dict[str, ContentCodec] = {}
        for codec in codecs or []:
            self.register(codec)

    def register(self, codec: ContentCodec) -> None:
        key = codec.content_type.key
        if key in self._codecs:
            raise ValueError(f"Codec for '{key}' is already registered")
        self._codecs[key] = codec

    def codec_for(self, content_type: ContentTypeId) -> Optional[ContentCodec]:
        return self._codecs.get(content_type.key)

    def content_types(self) -> List[ContentTypeId]:
        return [codec.content_type for codec in self._codecs.values()]


class NoCodecRegistry:
    """
    Resolves nothing. Passed to encoders that must produce a flat,
    self-contained envelope.
    """

    def codec_for(self, content_type: ContentTypeId) -> Optional[ContentCodec]:
        return None
