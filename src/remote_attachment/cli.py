"""
remote-attachment CLI
---------------------

Provides:
  - seal: encrypt a file for upload and print its remote attachment envelope
  - open: fetch, verify and decrypt a remote attachment envelope
"""

from __future__ import annotations
import argparse
import logging
import mimetypes
import os
import sys
from typing import List, Optional

from remote_attachment.codecs import (
    AttachmentCodec,
    ContentTypeRemoteAttachment,
    RemoteAttachmentCodec,
    default_registry,
)
from remote_attachment.protocol import wire
from remote_attachment.protocol.errors import EnvelopeError, RemoteAttachmentError
from remote_attachment.protocol.models import Attachment, RemoteAttachment
from remote_attachment.transport.http import HTTPFetcher
from remote_attachment.utils.logging import configure_logging

logger = logging.getLogger("remote_attachment.cli")


def _safe_filename(filename: str) -> str:
    """
    The attachment filename is chosen by the sender: keep only its last
    path component so it always lands in the working directory.
    """
    name = os.path.basename(filename.replace("\\", "/"))
    if name in ("", ".", ".."):
        raise EnvelopeError(f"attachment filename {filename!r} is not usable, pass --output")
    return name


def cmd_seal(args) -> None:
    """
    Seals a file as an attachment. The ciphertext is written to disk for the
    caller to upload at --url; the envelope referencing it goes to stdout.
    """
    with open(args.file, "rb") as f:
        data = f.read()

    filename = os.path.basename(args.file)
    mime_type = args.mime_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"

    encrypted = RemoteAttachmentCodec.encode_encrypted(
        Attachment(filename=filename, mime_type=mime_type, data=data),
        AttachmentCodec(),
    )

    remote = RemoteAttachment.from_encrypted(
        encrypted,
        url=args.url,
        filename=filename,
        content_length=len(data),
    )
    encoded = RemoteAttachmentCodec().encode(remote)

    payload_path = os.path.join(args.out_dir, f"{encrypted.digest}.bin")
    with open(payload_path, "wb") as f:
        f.write(encrypted.payload)
    logger.info("Wrote %d byte payload to %s", len(encrypted.payload), payload_path)

    print(wire.encode_content(encoded).decode("utf-8"))


def cmd_open(args) -> None:
    """
    Loads the content behind a remote attachment envelope.
    """
    with open(args.envelope, "rb") as f:
        encoded = wire.decode_content(f.read())

    if not encoded.type.same_as(ContentTypeRemoteAttachment):
        raise EnvelopeError(f"{args.envelope} holds {encoded.type}, not a remote attachment")

    remote = RemoteAttachmentCodec().decode(encoded)
    with HTTPFetcher(timeout=args.timeout) as fetcher:
        content = RemoteAttachmentCodec.load(remote, default_registry(), fetcher=fetcher)

    if isinstance(content, Attachment):
        output = args.output or _safe_filename(content.filename)
        with open(output, "wb") as f:
            f.write(content.data)
        print(f"Wrote {len(content.data)} bytes ({content.mime_type}) to {output}")
    else:
        print(content)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="remote-attachment",
        description="Seal and open encrypted remote attachments",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING/ERROR")
    sub = parser.add_subparsers(dest="command")

    # seal
    p_seal = sub.add_parser("seal", help="Encrypt a file for upload")
    p_seal.add_argument("file", help="File to seal")
    p_seal.add_argument("--url", required=True, help="https URL the payload will be uploaded to")
    p_seal.add_argument("--mime-type", default=None, help="MIME type (guessed from filename if omitted)")
    p_seal.add_argument("--out-dir", default=".", help="Directory for the encrypted payload")
    p_seal.set_defaults(func=cmd_seal)

    # open
    p_open = sub.add_parser("open", help="Fetch and decrypt a remote attachment")
    p_open.add_argument("envelope", help="File holding the encoded remote attachment envelope")
    p_open.add_argument("--output", default=None, help="Where to write the attachment data")
    p_open.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds")
    p_open.set_defaults(func=cmd_open)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    try:
        args.func(args)
    except RemoteAttachmentError as e:
        print(f"Error ({e.code.value}): {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
