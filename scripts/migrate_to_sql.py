"""One-off migration script: JSON-file store (data.json) -> SQL storage_entries."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

# Garantir que o pacote portal seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portal.core.config import get_settings
from portal.core.log_setup import configure_logging
from portal.db.create_tables import create_all
from portal.repositories.backends import StorageError, copy_entries
from portal.repositories.json_storage import JsonFileBackend
from portal.repositories.sql_repository import SQLBackend

logger = logging.getLogger("portal.scripts.migrate_to_sql")


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy a JSON-file store into the SQL backend")
    ap.add_argument("--data-file", default=str(settings.data_file), help="JSON store to read")
    ap.add_argument("--overwrite", action="store_true", help="replace keys already present in SQL")
    args = ap.parse_args()
    configure_logging(settings.log_level)

    data_file = Path(args.data_file)
    if not data_file.exists():
        raise SystemExit(f"Arquivo nao encontrado: {data_file}")
    if not settings.database_url:
        raise SystemExit("DATABASE_URL must be set")

    create_all()
    try:
        copied, skipped = copy_entries(JsonFileBackend(data_file), SQLBackend(), overwrite=args.overwrite)
    except StorageError as exc:
        raise SystemExit(f"Migration failed: {exc}") from exc
    logger.info("copied %d key(s), skipped %d existing", copied, skipped)


if __name__ == "__main__":
    main()
