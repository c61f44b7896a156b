"""
JSON-file persistence backend.

The whole store is one JSON document (key -> raw string) read on every call
and rewritten on every write, which keeps the file the source of truth.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import os
import tempfile

from portal.repositories.backends import StorageError, check_quota


class JsonFileBackend:
    """StorageBackend over a single JSON file."""

    def __init__(self, path: Path | str, quota: int = 0) -> None:
        self.path = Path(path)
        self.quota = quota

    def load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return {str(k): v if isinstance(v, str) else json.dumps(v) for k, v in data.items()}

    def save(self, db: dict[str, str]) -> None:
        """Replace the file atomically; on failure the previous document stays intact."""
        try:
            payload = json.dumps(db, ensure_ascii=False, indent=2).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise StorageError(f"cannot encode {self.path}: {exc}") from exc
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"cannot write {self.path}: {exc}") from exc

    def get_item(self, key: str) -> Optional[str]:
        return self.load().get(key)

    def set_item(self, key: str, value: str) -> None:
        db = self.load()
        value = str(value)
        check_quota(db, key, value, self.quota)
        db[key] = value
        self.save(db)

    def has_item(self, key: str) -> bool:
        return key in self.load()

    def remove_item(self, key: str) -> None:
        db = self.load()
        if db.pop(key, None) is not None:
            self.save(db)

    def keys(self) -> list[str]:
        return list(self.load())
