"""Key-value backend stored in the storage_entries table via SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from portal.db.models import StorageEntry
from portal.db.session import get_session
from portal.repositories.backends import StorageError


class SQLBackend:
    """StorageBackend where every call opens and closes its own session."""

    def get_item(self, key: str) -> Optional[str]:
        try:
            with get_session() as session:
                entry = session.get(StorageEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot read {key!r}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        try:
            with get_session() as session:
                entry = session.get(StorageEntry, key)
                if not entry:
                    session.add(StorageEntry(key=key, value=str(value), updated_at=now))
                else:
                    entry.value = str(value)
                    entry.updated_at = now
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot write {key!r}: {exc}") from exc

    def has_item(self, key: str) -> bool:
        try:
            with get_session() as session:
                stmt = select(StorageEntry.key).where(StorageEntry.key == key).limit(1)
                return session.execute(stmt).first() is not None
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot read {key!r}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            with get_session() as session:
                session.execute(delete(StorageEntry).where(StorageEntry.key == key))
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot remove {key!r}: {exc}") from exc

    def keys(self) -> list[str]:
        try:
            with get_session() as session:
                return list(session.execute(select(StorageEntry.key).order_by(StorageEntry.key)).scalars())
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot list keys: {exc}") from exc
