from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.engclass.engclass.container import build_store
from src.engclass.engclass.database.bootstrap import ensure_indexes, seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store_config = dict(settings.STORE_CONFIG)

    store, conn = build_store(store_config)
    try:
        if conn is not None:
            ensure_indexes(conn.database())
        seeded = seed_demo_data(store)
    finally:
        if conn is not None:
            conn.close()

    status = "Seeded demo data" if seeded else "Store already has classes, nothing seeded"
    print(f"OK: {status} -> {store_config.get('backend')}:{store_config.get('database')}")


if __name__ == "__main__":
    main()
