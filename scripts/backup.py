"""Backup the record store.

Note: Writes each collection as a JSON array under ``backups/<timestamp>/``,
the same shape the store persists, so a backup can be restored with ``put``.
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from smartattend.config import get_settings_module
from smartattend.container import build_store
from smartattend.core.enums import Collection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = Path(__file__).resolve().parents[1] / "backups" / ts
    out_dir.mkdir(parents=True, exist_ok=True)

    for collection in Collection:
        items = store.get(collection)
        out_file = out_dir / f"{collection.value}.json"
        out_file.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        print(f"OK: {collection.value} -> {out_file} ({len(items)} items)")


if __name__ == "__main__":
    main()
