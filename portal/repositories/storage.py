"""
Generic load/save over a StorageBackend.

Callers never need a try/except around these calls: a read that cannot be
completed yields the caller's default, a write that cannot be completed
yields False. Failures are logged here and nowhere else.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Optional

from portal.repositories.backends import StorageBackend, get_backend

logger = logging.getLogger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def _check_round_trip(value: Any) -> None:
    if isinstance(value, tuple):
        raise TypeError("tuples are stored as lists and would not read back equal")
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"dict key {k!r} is not a string and would read back as one")
            _check_round_trip(v)
    elif isinstance(value, list):
        for item in value:
            _check_round_trip(item)


def dumps(value: Any) -> str:
    """JSON text that loads back equal to ``value``; raises TypeError or ValueError otherwise."""
    _check_round_trip(value)
    return json.dumps(value, allow_nan=False)


class Storage:
    """JSON (de)serialization and failure policy on top of a raw backend."""

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend

    def load(self, key: str, default: Any = None, seed: Any = UNSET) -> Any:
        """Return the value stored under ``key``.

        When nothing is stored and a seed is given, the seed is written to the
        backend before being returned, so the first read establishes the
        record. Without a seed the default is returned and nothing is written.
        A ``None`` seed counts as no seed.

        Stored payloads that do not decode, or decode to null, yield the
        default. The stored value is returned as-is otherwise; neither seed nor
        default is consulted.
        """
        try:
            raw = self.backend.get_item(key)
            if not raw:
                if seed is not UNSET and seed is not None:
                    self.backend.set_item(key, dumps(seed))
                    return seed
                return default
            parsed = json.loads(raw)
        except Exception as exc:
            logger.warning("Error loading from storage (key: %s): %s", key, exc)
            return default
        return parsed if parsed is not None else default

    def save(self, key: str, value: Any) -> bool:
        """Overwrite ``key`` with the JSON form of ``value``; False on any failure."""
        try:
            payload = dumps(value)
            self.backend.set_item(key, payload)
        except Exception as exc:
            logger.error("Error saving to storage (key: %s): %s", key, exc)
            return False
        return True

    def load_raw(self, key: str, seed: Optional[str] = None) -> Optional[str]:
        """Stored string as-is, without JSON decoding.

        Absent values are seeded like in load(); None means absent without a
        seed, or unreadable.
        """
        try:
            raw = self.backend.get_item(key)
            if not raw and seed is not None:
                self.backend.set_item(key, str(seed))
                return str(seed)
            return raw
        except Exception as exc:
            logger.warning("Error reading raw value (key: %s): %s", key, exc)
            return None

    def save_raw(self, key: str, text: str) -> bool:
        try:
            self.backend.set_item(key, str(text))
        except Exception as exc:
            logger.error("Error writing raw value (key: %s): %s", key, exc)
            return False
        return True


@lru_cache
def get_storage() -> Storage:
    """Process-wide Storage on the backend selected by settings."""
    return Storage(get_backend())


def load(key: str, default: Any = None, seed: Any = UNSET) -> Any:
    return get_storage().load(key, default, seed)


def save(key: str, value: Any) -> bool:
    return get_storage().save(key, value)
