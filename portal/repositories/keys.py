"""
Storage key templates.

Every entity family owns a literal prefix that is never reused. The version
tag inside a prefix marks the schema: bumping it starts a fresh key and the
data under the old one is abandoned, not migrated.
"""
from __future__ import annotations

KEY_BUILDINGS_DB = "pu_buildings_db_v1"
KEY_USERS_DB = "PORTAL_USERS_DB"

DUES_PREFIX = "pu_dues_v1__"
FINANCE_ITEMS_PREFIX = "pu_finance_items_v3__"
FIRMS_PREFIX = "pu_finance_firms_v3__"
BOARD_PREFIX = "pu_board_posts_v2__"
FORUM_PREFIX = "pu_forum_proposals_v2__"
OPENING_BALANCE_PREFIX = "pu_opening_balance__"
READ_PREFIX = "pu_read_"


def buildings_key() -> str:
    return KEY_BUILDINGS_DB


def users_key() -> str:
    return KEY_USERS_DB


def dues_key(building_id) -> str:
    return f"{DUES_PREFIX}{building_id}"


def finance_items_key(building_id) -> str:
    return f"{FINANCE_ITEMS_PREFIX}{building_id}"


def firms_key(building_id) -> str:
    return f"{FIRMS_PREFIX}{building_id}"


def board_key(building_id) -> str:
    return f"{BOARD_PREFIX}{building_id}"


def forum_key(building_id) -> str:
    return f"{FORUM_PREFIX}{building_id}"


def opening_balance_key(building_id) -> str:
    return f"{OPENING_BALANCE_PREFIX}{building_id}"


def read_key(building_id, kind) -> str:
    """Read-tracking key for one content kind ('board', 'forum', ...) of a building."""
    return f"{READ_PREFIX}{kind}__{building_id}"


KEY_FAMILIES = {
    "dues": dues_key,
    "finance_items": finance_items_key,
    "firms": firms_key,
    "board": board_key,
    "forum": forum_key,
    "opening_balance": opening_balance_key,
}
