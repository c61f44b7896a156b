#!/usr/bin/env python3
"""
Inspect one building in the configured store, or clear its read markers.

Uso:
  python scripts/building_state.py --building b1
  python scripts/building_state.py --building b1 --reset-read board
"""
from __future__ import annotations

import argparse
import json
import sys

from portal.core.config import get_settings
from portal.core.dates import months_between_inclusive, ym_now
from portal.core.log_setup import configure_logging
from portal.repositories.backends import get_backend
from portal.repositories.entities import PortalRepository
from portal.repositories.storage import Storage


def summarize(repo: PortalRepository, building_id: str) -> dict:
    dues = repo.load_dues(building_id)
    return {
        "building": building_id,
        "dues": {
            "monthlyFee": dues["monthlyFee"],
            "startMonth": dues["startMonth"],
            "monthsDue": months_between_inclusive(dues["startMonth"], ym_now()),
            "payers": len(dues["paymentsByUser"]),
        },
        "openingBalance": repo.load_opening_balance(building_id),
        "financeItems": len(repo.load_items(building_id)),
        "firms": len(repo.load_firms(building_id)),
        "boardPosts": len(repo.load_board_posts(building_id)),
        "proposals": len(repo.load_proposals(building_id)),
    }


def main() -> None:
    ap = argparse.ArgumentParser(description="Estado de um predio no armazenamento")
    ap.add_argument("--building", required=True, help="ID do predio")
    ap.add_argument("--reset-read", metavar="KIND", help="Limpar marcadores de leitura (ex.: board, forum)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    building_id = (args.building or "").strip()
    if not building_id:
        raise SystemExit("ID do predio invalido")
    if settings.storage_backend == "memory":
        raise SystemExit("PORTAL_STORAGE_BACKEND=memory nao persiste; use json ou sql")

    repo = PortalRepository(Storage(get_backend(settings)))
    if args.reset_read:
        if not repo.save_read_map(building_id, args.reset_read, {}):
            raise SystemExit("Falha ao gravar marcadores de leitura")
        print(f"OK: marcadores '{args.reset_read}' limpos para {building_id}")
        return

    print(json.dumps(summarize(repo, building_id), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
