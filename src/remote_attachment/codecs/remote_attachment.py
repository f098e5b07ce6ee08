"""
Remote static attachment content type
-------------------------------------

Lets a message reference an encrypted payload by URL instead of carrying it
inline.

Sealing (sender):

    encrypted = RemoteAttachmentCodec.encode_encrypted(attachment, AttachmentCodec())
    url = upload(encrypted.payload)                 # caller's storage
    remote = RemoteAttachment.from_encrypted(
        encrypted, url=url, filename="a.txt", content_length=len(attachment.data)
    )

Opening (receiver):

    remote = codec.decode(encoded)
    attachment = RemoteAttachmentCodec.load(remote, registry)

The digest covers the ciphertext, and `load` verifies it before anything is
decrypted or decoded.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any, Optional

from remote_attachment.codecs.attachment import attachment_fallback
from remote_attachment.core.registry import CodecLookup, ContentCodec, NoCodecRegistry
from remote_attachment.protocol import wire
from remote_attachment.protocol.errors import (
    CodecNotFoundError,
    EnvelopeError,
    IntegrityError,
    KeyMaterialError,
    SchemeError,
)
from remote_attachment.protocol.models import (
    Ciphertext,
    ContentTypeId,
    EncodedContent,
    EncryptedEncodedContent,
    RemoteAttachment,
)
from remote_attachment.security.cipher import Cipher, default_cipher
from remote_attachment.security.digest import digest_of, verify_digest
from remote_attachment.transport.base import Fetcher
from remote_attachment.transport.http import HTTPFetcher

logger = logging.getLogger(__name__)

ContentTypeRemoteAttachment = ContentTypeId(
    authority_id="xmtp.org",
    type_id="remoteStaticAttachment",
    version_major=1,
    version_minor=0,
)

SECURE_SCHEME = "https://"
SECRET_LENGTH = 32


def _hex_param(parameters: dict, name: str) -> bytes:
    try:
        return bytes.fromhex(parameters[name])
    except KeyError as e:
        raise EnvelopeError(f"remote attachment is missing parameter {name!r}") from e
    except ValueError as e:
        raise EnvelopeError(f"invalid hex in remote attachment parameter {name!r}") from e


def _str_param(parameters: dict, name: str) -> str:
    try:
        return parameters[name]
    except KeyError as e:
        raise EnvelopeError(f"remote attachment is missing parameter {name!r}") from e


class RemoteAttachmentCodec:
    @property
    def content_type(self) -> ContentTypeId:
        return ContentTypeRemoteAttachment

    # ------------------------------------------------------------------
    # Opening
    # ------------------------------------------------------------------
    @staticmethod
    def load(
        remote: RemoteAttachment,
        registry: CodecLookup,
        *,
        fetcher: Optional[Fetcher] = None,
        cipher: Optional[Cipher] = None,
    ) -> Any:
        """
        Fetch, verify, decrypt and decode the content behind `remote`.

        Stops at the first failing stage:
            FetchError          payload unreachable or empty
            IntegrityError      payload digest differs from contentDigest
            DecryptionError     payload does not decrypt under the secret
            EnvelopeError       decrypted bytes are not an encoded content
            CodecNotFoundError  no codec for the decrypted content type
        """
        cipher = cipher or default_cipher

        if fetcher is None:
            with HTTPFetcher() as owned:
                payload = owned.fetch(remote.url)
        else:
            payload = fetcher.fetch(remote.url)

        if not verify_digest(payload, remote.content_digest):
            logger.warning("Content digest mismatch for remote attachment at %s", remote.url)
            raise IntegrityError("content digest does not match")

        encoded_data = cipher.decrypt(
            Ciphertext(salt=remote.salt, nonce=remote.nonce, payload=payload),
            remote.secret,
        )
        encoded = wire.decode_content(encoded_data)

        codec = registry.codec_for(encoded.type)
        if codec is None:
            logger.warning("No codec registered for %s", encoded.type)
            raise CodecNotFoundError(f"no codec found for {encoded.type.type_id}")

        logger.debug("Decoding remote attachment %s as %s", remote.filename, encoded.type)
        return codec.decode(encoded, registry)

    # ------------------------------------------------------------------
    # Sealing
    # ------------------------------------------------------------------
    @staticmethod
    def encode_encrypted(
        content: Any,
        codec: ContentCodec,
        *,
        cipher: Optional[Cipher] = None,
    ) -> EncryptedEncodedContent:
        """
        Encode `content` with `codec`, encrypt it under a fresh one-time
        secret and digest the resulting ciphertext.
        """
        cipher = cipher or default_cipher

        secret = secrets.token_bytes(SECRET_LENGTH)
        encoded_data = wire.encode_content(codec.encode(content, NoCodecRegistry()))

        ciphertext = cipher.encrypt(encoded_data, secret)
        salt = getattr(ciphertext, "salt", None)
        nonce = getattr(ciphertext, "nonce", None)
        payload = getattr(ciphertext, "payload", None)

        if not salt or not nonce or not payload:
            raise KeyMaterialError("missing encryption key")

        digest = digest_of(payload)
        logger.debug("Sealed %d bytes of %s content", len(payload), codec.content_type)

        return EncryptedEncodedContent(
            digest=digest,
            salt=salt,
            nonce=nonce,
            secret=secret,
            payload=payload,
        )

    seal = encode_encrypted

    # ------------------------------------------------------------------
    # Reference envelope
    # ------------------------------------------------------------------
    def encode(self, content: RemoteAttachment, registry: Optional[CodecLookup] = None) -> EncodedContent:
        if not content.url.startswith(SECURE_SCHEME):
            raise SchemeError("scheme must be https")

        return EncodedContent(
            type=ContentTypeRemoteAttachment,
            parameters={
                "contentDigest": content.content_digest,
                "salt": content.salt.hex(),
                "nonce": content.nonce.hex(),
                "secret": content.secret.hex(),
                "scheme": content.scheme,
                "contentLength": str(content.content_length),
                "filename": content.filename,
            },
            content=content.url.encode("utf-8"),
            fallback=self.fallback(content),
        )

    def decode(self, encoded: EncodedContent, registry: Optional[CodecLookup] = None) -> RemoteAttachment:
        parameters = encoded.parameters

        try:
            url = encoded.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EnvelopeError("remote attachment url is not valid UTF-8") from e

        length = _str_param(parameters, "contentLength")
        if not (length.isascii() and length.isdigit()):
            raise EnvelopeError(f"invalid contentLength {length!r}")
        content_length = int(length)

        return RemoteAttachment(
            url=url,
            content_digest=_str_param(parameters, "contentDigest"),
            salt=_hex_param(parameters, "salt"),
            nonce=_hex_param(parameters, "nonce"),
            secret=_hex_param(parameters, "secret"),
            scheme=_str_param(parameters, "scheme"),
            content_length=content_length,
            filename=_str_param(parameters, "filename"),
        )

    def fallback(self, content: RemoteAttachment) -> Optional[str]:
        return attachment_fallback(content.filename)
