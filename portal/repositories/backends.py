"""Key-value backend contract and the in-memory implementation."""
from __future__ import annotations

from typing import Iterable, Optional, Protocol

from portal.core.config import Settings, get_settings


class StorageError(Exception):
    """Raised by a backend when it cannot complete a read or write."""


class StorageQuotaExceeded(StorageError):
    """Raised when a write would push the store past its byte quota."""


class BackendConfigError(StorageError):
    """Raised when the configured backend cannot be built."""


class StorageBackend(Protocol):
    """Synchronous string-keyed store (the shape of browser localStorage)."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def has_item(self, key: str) -> bool: ...

    def remove_item(self, key: str) -> None: ...

    def keys(self) -> Iterable[str]: ...


def entries_size(entries: dict[str, str]) -> int:
    """Characters used by keys plus values, the unit browsers apply quotas in."""
    return sum(len(k) + len(v) for k, v in entries.items())


def check_quota(entries: dict[str, str], key: str, value: str, quota: int) -> None:
    if not quota:
        return
    projected = entries_size(entries) - (len(key) + len(entries[key]) if key in entries else 0)
    projected += len(key) + len(value)
    if projected > quota:
        raise StorageQuotaExceeded(
            f"writing {key!r} needs {projected} chars, quota is {quota}"
        )


class MemoryBackend:
    """Dict-backed store; lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None, quota: int = 0) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self.quota = quota

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        value = str(value)
        check_quota(self._items, key, value, self.quota)
        self._items[key] = value

    def has_item(self, key: str) -> bool:
        return key in self._items

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def get_backend(settings: Settings | None = None) -> StorageBackend:
    """Build the backend named by PORTAL_STORAGE_BACKEND (memory, json or sql)."""
    settings = settings or get_settings()
    name = settings.storage_backend
    if name == "memory":
        return MemoryBackend(quota=settings.storage_quota_bytes)
    if name == "json":
        from portal.repositories.json_storage import JsonFileBackend

        return JsonFileBackend(settings.data_file, quota=settings.storage_quota_bytes)
    if name == "sql":
        if not (settings.database_url or "").strip():
            raise BackendConfigError("DATABASE_URL must be configured to use the SQL backend.")
        from portal.repositories.sql_repository import SQLBackend

        return SQLBackend()
    raise BackendConfigError(f"Unknown storage backend: {name!r}")


def copy_entries(source: StorageBackend, target: StorageBackend, *, overwrite: bool = False) -> tuple[int, int]:
    """Copy raw values key by key; returns (copied, skipped).

    Keys already present in ``target`` are skipped unless ``overwrite`` is set.
    """
    copied = skipped = 0
    for key in source.keys():
        if not overwrite and target.has_item(key):
            skipped += 1
            continue
        value = source.get_item(key)
        if value is None:
            continue
        target.set_item(key, value)
        copied += 1
    return copied, skipped
