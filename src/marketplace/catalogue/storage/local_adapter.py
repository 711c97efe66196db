"""Filesystem-backed object store serving files under the media URL."""

from pathlib import Path, PurePosixPath
from uuid import uuid4

from marketplace import config
from marketplace.catalogue.storage.port import ObjectStore, StoredObject
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

_ALLOWED_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


class LocalObjectStore(ObjectStore):
    def __init__(self, root: str | Path | None = None, base_url: str | None = None) -> None:
        self.root = Path(root or config.MEDIA_ROOT)
        self.base_url = (base_url if base_url is not None else config.MEDIA_URL).rstrip("/")

    def _key_for(self, filename: str | None) -> str:
        suffix = PurePosixPath(filename or "").suffix.lower()
        if suffix not in _ALLOWED_SUFFIXES:
            suffix = ""
        return f"{uuid4().hex}{suffix}"

    def put(self, content: bytes, filename: str | None = None, content_type: str | None = None) -> StoredObject:
        self.root.mkdir(parents=True, exist_ok=True)
        key = self._key_for(filename)
        (self.root / key).write_bytes(content)
        logger.info("Stored object", key=key, size=len(content))
        return StoredObject(key=key, url=f"{self.base_url}/{key}", content_type=content_type, size=len(content))

    def delete(self, url: str) -> None:
        prefix = f"{self.base_url}/"
        if not url or not url.startswith(prefix):
            return
        key = url[len(prefix) :]
        if "/" in key or key in ("", ".", ".."):
            return
        path = self.root / key
        if path.exists():
            path.unlink()
            logger.info("Deleted object", key=key)
