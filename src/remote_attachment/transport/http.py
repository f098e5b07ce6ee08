"""
HTTP fetcher for remote attachment payloads.

- GETs the ciphertext stored at the attachment URL
- Returns the raw body bytes
- One request per call: no retries, no digest checks
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from remote_attachment.core.settings import get_settings
from remote_attachment.protocol.errors import FetchError
from remote_attachment.transport.base import Fetcher

logger = logging.getLogger(__name__)


class HTTPFetcher(Fetcher):
    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        """
        :param timeout: request timeout in seconds; defaults to the configured
                        fetch timeout, which is unset (no timeout) by default
        :param session: optional custom requests.Session
        :param user_agent: optional User-Agent override
        """
        settings = get_settings().fetch
        self._timeout = timeout if timeout is not None else settings.timeout
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._headers = {"User-Agent": user_agent or settings.user_agent}

    def fetch(self, url: str) -> bytes:
        logger.debug("Fetching remote attachment payload from %s", url)

        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"failed to fetch remote attachment at {url}: {e}") from e

        payload = response.content
        if not payload:
            raise FetchError(f"no payload for remote attachment at {url}")

        logger.debug("Fetched %d bytes from %s", len(payload), url)
        return payload

    def close(self) -> None:
        """Close the session if this fetcher created it."""
        if self._owns_session:
            self._session.close()
