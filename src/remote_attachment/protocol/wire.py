"""
Outer envelope wire format
--------------------------

Serializes EncodedContent to bytes and back. The document is compact JSON:

    {
      "type": {"authorityId": "xmtp.org", "typeId": "text",
               "versionMajor": 1, "versionMinor": 0},
      "parameters": {"encoding": "UTF-8"},
      "content": "<base64>",
      "fallback": "...",          # optional
      "compression": "..."        # optional
    }

Parameter values are always strings; callers hex/decimal encode anything
else before it reaches this layer.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict

from remote_attachment.protocol.errors import EnvelopeError
from remote_attachment.protocol.models import ContentTypeId, EncodedContent


def _json_dumps(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def content_type_to_dict(content_type: ContentTypeId) -> Dict[str, Any]:
    return {
        "authorityId": content_type.authority_id,
        "typeId": content_type.type_id,
        "versionMajor": content_type.version_major,
        "versionMinor": content_type.version_minor,
    }


def content_type_from_dict(data: Any) -> ContentTypeId:
    if not isinstance(data, dict):
        raise EnvelopeError("no content type")

    authority_id = data.get("authorityId")
    type_id = data.get("typeId")
    if not authority_id or not type_id:
        raise EnvelopeError("no content type")

    try:
        major = int(data.get("versionMajor", 0))
        minor = int(data.get("versionMinor", 0))
    except (TypeError, ValueError):
        raise EnvelopeError(f"invalid content type version for {type_id}")

    return ContentTypeId(
        authority_id=str(authority_id),
        type_id=str(type_id),
        version_major=major,
        version_minor=minor,
    )


def encode_content(encoded: EncodedContent) -> bytes:
    doc: Dict[str, Any] = {
        "type": content_type_to_dict(encoded.type),
        "parameters": dict(encoded.parameters),
        "content": base64.b64encode(encoded.content).decode("ascii"),
    }
    if encoded.fallback is not None:
        doc["fallback"] = encoded.fallback
    if encoded.compression is not None:
        doc["compression"] = encoded.compression
    return _json_dumps(doc).encode("utf-8")


def decode_content(data: bytes) -> EncodedContent:
    if not data:
        raise EnvelopeError("no encoded content")

    try:
        doc = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        raise EnvelopeError("encoded content is not a valid envelope")

    if not isinstance(doc, dict):
        raise EnvelopeError("no encoded content")

    content_type = content_type_from_dict(doc.get("type"))

    parameters = doc.get("parameters") or {}
    if not isinstance(parameters, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in parameters.items()
    ):
        raise EnvelopeError("envelope parameters must be a string map")

    try:
        content = base64.b64decode(doc.get("content") or "", validate=True)
    except (binascii.Error, TypeError, ValueError):
        raise EnvelopeError("invalid base64 in envelope content")

    return EncodedContent(
        type=content_type,
        parameters=parameters,
        content=content,
        fallback=doc.get("fallback"),
        compression=doc.get("compression"),
    )
