"""Key-value storage backends for persisted shopper state"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Protocol

from ..core.exceptions import StorageQuotaExceeded

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """String storage addressed by fixed keys"""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """In-memory storage with an optional size quota"""

    def __init__(self, quota_bytes: Optional[int] = None):
        self.items: dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(len(v.encode()) for k, v in self.items.items() if k != key)
            if used + len(value.encode()) > self.quota_bytes:
                raise StorageQuotaExceeded(f"Storage quota of {self.quota_bytes} bytes exceeded")
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)

    def clear(self) -> None:
        self.items.clear()


class FileStorage:
    """Stores each key as a JSON file inside a directory"""

    _UNSAFE = re.compile(r"[^A-Za-z0-9_.-]")

    def __init__(self, directory: str, quota_bytes: Optional[int] = None):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        return self.directory / f"{self._UNSAFE.sub('_', key)}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        data = value.encode("utf-8")
        if self.quota_bytes is not None and len(data) > self.quota_bytes:
            raise StorageQuotaExceeded(f"Storage quota of {self.quota_bytes} bytes exceeded")

        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)
        logger.debug(f"Wrote {len(data)} bytes to {path}")

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def create_storage(storage_dir: Optional[str] = None, quota_bytes: Optional[int] = None) -> KeyValueStorage:
    """Pick a backend from configuration"""
    if storage_dir:
        logger.info(f"Using file storage at {storage_dir}")
        return FileStorage(storage_dir, quota_bytes=quota_bytes)
    logger.info("Using in-memory storage")
    return MemoryStorage(quota_bytes=quota_bytes)
