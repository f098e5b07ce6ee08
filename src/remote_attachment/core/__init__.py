from .registry import CodecLookup, ContentCodec, CodecRegistry, NoCodecRegistry
from .settings import RemoteAttachmentSettings, FetchSettings, get_settings

__all__ = [
    "CodecLookup",
    "ContentCodec",
    "CodecRegistry",
    "NoCodecRegistry",
    "RemoteAttachmentSettings",
    "FetchSettings",
    "get_settings",
]
