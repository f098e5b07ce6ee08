from __future__ import annotations

from typing import Dict

from remote_attachment.protocol.errors import FetchError
from remote_attachment.transport.base import Fetcher


class InProcessFetcher(Fetcher):
    """
    Dict-backed store standing in for an upload host.
    """

    def __init__(self) -> None:
        self._blobs: Dict[str, bytes] = {}

    def upload(self, url: str, data: bytes) -> str:
        self._blobs[url] = bytes(data)
        return url

    def fetch(self, url: str) -> bytes:
        data = self._blobs.get(url)
        if data is None:
            raise FetchError(f"no payload for remote attachment at {url}")
        if not data:
            raise FetchError(f"empty payload for remote attachment at {url}")
        return data
