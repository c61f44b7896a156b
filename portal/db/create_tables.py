"""Create (or drop) the storage_entries table for the configured DATABASE_URL."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers StorageEntry on Base.metadata


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())


def drop_all() -> None:
    Base.metadata.drop_all(bind=get_engine())


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Manage the portal storage schema")
    ap.add_argument("--drop", action="store_true", help="drop storage_entries instead of creating it")
    args = ap.parse_args()
    try:
        if args.drop:
            drop_all()
            print("storage_entries dropped.")
        else:
            create_all()
            print("storage_entries created.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Schema operation failed: {exc}") from exc
