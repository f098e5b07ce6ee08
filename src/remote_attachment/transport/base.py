from __future__ import annotations

"""
Fetch boundary for remote attachment payloads.

Fetchers DO NOT:
  - verify digests
  - decrypt
  - retry

Fetchers ONLY:
  - retrieve the bytes stored at a URL
  - raise FetchError when that fails or the body is empty
"""

from abc import ABC, abstractmethod


class Fetcher(ABC):
    @abstractmethod
    def fetch(self, url: str) -> bytes:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
