"""I/O ports used by the reference resolver.

The resolver never touches the network or the disk directly; it goes through
a :class:`Fetcher` and a :class:`FileSystem`. The defaults below are the real
implementations, tests swap in in-memory fakes.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass
class FetchResponse:
    """Result of fetching a remote resource."""

    status_code: int
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Fetcher(ABC):
    """Fetches remote bytes."""

    @abstractmethod
    def fetch(self, url: str) -> FetchResponse:
        """Fetch ``url``.

        Raises:
            Exception: On transport errors (connection, TLS, timeout)
        """
        pass


class FileSystem(ABC):
    """Read-only view of the local filesystem."""

    @abstractmethod
    def cwd(self) -> str:
        """Working directory that relative references resolve against."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Whether ``path`` denotes a regular file."""
        pass

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        pass


class HttpxFetcher(Fetcher):
    """Fetcher backed by an ``httpx.Client``.

    Args:
        timeout: Seconds before giving up, ``None`` waits indefinitely
        client: Optional pre-configured client (its lifecycle stays with the caller)
    """

    def __init__(self, timeout: Optional[float] = None, client: Optional[httpx.Client] = None):
        self.timeout = timeout
        self._client = client

    def fetch(self, url: str) -> FetchResponse:
        if self._client is not None:
            response = self._client.get(url)
        else:
            with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                response = client.get(url)
        return FetchResponse(status_code=response.status_code, content=response.content)


class LocalFileSystem(FileSystem):
    """The process's own filesystem."""

    def cwd(self) -> str:
        return os.getcwd()

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()
