"""
Tests for HTTPFetcher with a mocked requests session.
"""

from unittest.mock import MagicMock

import pytest
import requests

from remote_attachment.protocol.errors import FetchError
from remote_attachment.transport.http import HTTPFetcher


def _session(content=b"ciphertext", error=None):
    response = MagicMock()
    response.content = content
    if error is not None:
        response.raise_for_status.side_effect = error
    session = MagicMock()
    session.get.return_value = response
    return session


class TestHTTPFetcher:
    def test_returns_body(self):
        session = _session(b"\x01\x02\x03")
        fetcher = HTTPFetcher(session=session)

        assert fetcher.fetch("https://example.com/a") == b"\x01\x02\x03"
        args, kwargs = session.get.call_args
        assert args == ("https://example.com/a",)
        assert kwargs["timeout"] is None
        assert kwargs["headers"]["User-Agent"] == "remote-attachment/1.0"

    def test_explicit_timeout(self):
        session = _session()
        HTTPFetcher(timeout=3.0, session=session).fetch("https://example.com/a")

        assert session.get.call_args.kwargs["timeout"] == 3.0

    def test_timeout_from_settings(self, monkeypatch):
        monkeypatch.setenv("REMOTE_ATTACHMENT_FETCH_TIMEOUT", "7.5")
        session = _session()
        HTTPFetcher(session=session).fetch("https://example.com/a")

        assert session.get.call_args.kwargs["timeout"] == 7.5

    def test_http_error_status(self):
        session = _session(error=requests.HTTPError("404 Client Error"))

        with pytest.raises(FetchError, match="404") as exc_info:
            HTTPFetcher(session=session).fetch("https://example.com/a")
        assert isinstance(exc_info.value.__cause__, requests.HTTPError)

    def test_connection_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(FetchError, match="connection refused"):
            HTTPFetcher(session=session).fetch("https://example.com/a")

    def test_empty_body(self):
        session = _session(b"")

        with pytest.raises(FetchError, match="no payload"):
            HTTPFetcher(session=session).fetch("https://example.com/a")

    def test_no_retry(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("timed out")

        with pytest.raises(FetchError):
            HTTPFetcher(session=session).fetch("https://example.com/a")
        assert session.get.call_count == 1

    def test_close_leaves_caller_session_open(self):
        session = _session()
        with HTTPFetcher(session=session) as fetcher:
            fetcher.fetch("https://example.com/a")

        session.close.assert_not_called()

    def test_close_releases_own_session(self, monkeypatch):
        session = _session()
        monkeypatch.setattr(requests, "Session", lambda: session)

        with HTTPFetcher() as fetcher:
            fetcher.fetch("https://example.com/a")

        session.close.assert_called_once()
