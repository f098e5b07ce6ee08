from .base import Fetcher
from .http import HTTPFetcher
from .inprocess import InProcessFetcher

__all__ = ["Fetcher", "HTTPFetcher", "InProcessFetcher"]
