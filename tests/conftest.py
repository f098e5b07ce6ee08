import pytest

from remote_attachment.codecs import AttachmentCodec, RemoteAttachmentCodec, TextCodec
from remote_attachment.core.registry import CodecRegistry
from remote_attachment.core.settings import get_settings
from remote_attachment.transport.inprocess import InProcessFetcher


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    """In-process stand-in for the upload host."""
    return InProcessFetcher()


@pytest.fixture
def registry():
    return CodecRegistry([TextCodec(), AttachmentCodec(), RemoteAttachmentCodec()])


@pytest.fixture
def remote_codec():
    return RemoteAttachmentCodec()
