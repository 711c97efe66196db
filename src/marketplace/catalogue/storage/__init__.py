"""Object store factory.

Provides get_object_store() / set_object_store() to swap implementations:
- LocalObjectStore for running deployments (default)
- InMemoryObjectStore for tests
"""

from marketplace.catalogue.storage.local_adapter import LocalObjectStore
from marketplace.catalogue.storage.memory_adapter import InMemoryObjectStore
from marketplace.catalogue.storage.port import ObjectStore, StoredObject

_current_store: ObjectStore | None = None


def get_object_store() -> ObjectStore:
    """Return the current object store. Defaults to LocalObjectStore."""
    global _current_store
    if _current_store is None:
        _current_store = LocalObjectStore()
    return _current_store


def set_object_store(store: ObjectStore) -> None:
    """Override the active object store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_object_store() -> None:
    """Reset to the default object store."""
    global _current_store
    _current_store = None


__all__ = [
    "InMemoryObjectStore",
    "LocalObjectStore",
    "ObjectStore",
    "StoredObject",
    "get_object_store",
    "reset_object_store",
    "set_object_store",
]
