"""In-memory object store for development and tests."""

from uuid import uuid4

from marketplace.catalogue.storage.port import ObjectStore, StoredObject


class InMemoryObjectStore(ObjectStore):
    """Keeps blobs in a dict keyed by URL."""

    def __init__(self, base_url: str = "memory://objects") -> None:
        self.base_url = base_url
        self.objects: dict[str, bytes] = {}

    def put(self, content: bytes, filename: str | None = None, content_type: str | None = None) -> StoredObject:
        key = uuid4().hex
        url = f"{self.base_url}/{key}"
        self.objects[url] = content
        return StoredObject(key=key, url=url, content_type=content_type, size=len(content))

    def delete(self, url: str) -> None:
        self.objects.pop(url, None)
