"""Per-entity load/save pairs built on the generic Storage adapter."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from portal.domain.balance import coerce_balance
from portal.domain.dues import default_dues, normalize_dues
from portal.repositories import keys
from portal.repositories.storage import Storage, get_storage

logger = logging.getLogger(__name__)


class PortalRepository:
    """Load/save helpers for every record family, scoped by building id."""

    def __init__(self, storage: Optional[Storage] = None) -> None:
        self.storage = storage or get_storage()

    # -------------------------- rosters --------------------------
    def load_buildings(self) -> list:
        return self.storage.load(keys.buildings_key(), [])

    def save_buildings(self, rows: list) -> bool:
        return self.storage.save(keys.buildings_key(), rows)

    def load_users(self) -> list:
        return self.storage.load(keys.users_key(), [])

    def save_users(self, rows: list | None) -> bool:
        return self.storage.save(keys.users_key(), rows or [])

    # -------------------------- dues --------------------------
    def load_dues(self, building_id: str, today: date | None = None) -> dict:
        """Dues record for a building, seeded on first read and repaired on every read.

        Repairs are not written back; call save_dues to persist them.
        """
        data = self.storage.load(keys.dues_key(building_id), None, default_dues(today))
        return normalize_dues(data, today)

    def save_dues(self, building_id: str, dues: dict) -> bool:
        return self.storage.save(keys.dues_key(building_id), dues)

    # -------------------------- finance --------------------------
    def load_items(self, building_id: str, seed: list | None = None) -> list:
        return self.storage.load(keys.finance_items_key(building_id), [], seed)

    def save_items(self, building_id: str, items: list) -> bool:
        return self.storage.save(keys.finance_items_key(building_id), items)

    def load_firms(self, building_id: str, seed: list | None = None) -> list:
        return self.storage.load(keys.firms_key(building_id), [], seed)

    def save_firms(self, building_id: str, firms: list) -> bool:
        return self.storage.save(keys.firms_key(building_id), firms)

    def load_opening_balance(self, building_id: str) -> int | float:
        """Opening balance as a number; the first read stores "0".

        Kept as a bare decimal string rather than JSON.
        """
        return coerce_balance(self.storage.load_raw(keys.opening_balance_key(building_id), seed="0"))

    def save_opening_balance(self, building_id: str, value: Any) -> bool:
        return self.storage.save_raw(keys.opening_balance_key(building_id), str(coerce_balance(value)))

    # -------------------------- board & forum --------------------------
    def load_board_posts(self, building_id: str, seed: list | None = None) -> list:
        return self.storage.load(keys.board_key(building_id), [], seed)

    def save_board_posts(self, building_id: str, posts: list) -> bool:
        return self.storage.save(keys.board_key(building_id), posts)

    def load_proposals(self, building_id: str, seed: list | None = None) -> list:
        return self.storage.load(keys.forum_key(building_id), [], seed)

    def save_proposals(self, building_id: str, proposals: list) -> bool:
        return self.storage.save(keys.forum_key(building_id), proposals)

    # -------------------------- read tracking --------------------------
    def load_read_map(self, building_id: str, kind: str) -> dict:
        return self.storage.load(keys.read_key(building_id, kind), {})

    def save_read_map(self, building_id: str, kind: str, read_map: dict) -> bool:
        return self.storage.save(keys.read_key(building_id, kind), read_map)

    def mark_read(self, building_id: str, kind: str, item_id: str, stamp: Any) -> bool:
        """Record one item as read; rewrites the whole map for that kind."""
        current = self.load_read_map(building_id, kind)
        read_map = dict(current) if isinstance(current, dict) else {}
        read_map[str(item_id)] = stamp
        ok = self.save_read_map(building_id, kind, read_map)
        if not ok:
            logger.warning("Could not mark %s item %s read for building %s", kind, item_id, building_id)
        return ok
