"""Object store port (abstract interface).

Listing images are handed to an object store which returns a stable URL.
Adapters: LocalObjectStore writes under a media directory, InMemoryObjectStore
keeps blobs in a dict for tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """A persisted blob and the URL it is served from."""

    key: str
    url: str
    content_type: str | None = None
    size: int = 0


class ObjectStore(ABC):
    """Abstract object store interface."""

    @abstractmethod
    def put(self, content: bytes, filename: str | None = None, content_type: str | None = None) -> StoredObject:
        """Persist ``content`` and return where it can be retrieved."""
        ...

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove a previously stored object. Unknown URLs are ignored."""
        ...
