from __future__ import annotations

import importlib

from dotenv import load_dotenv

from smartattend.config import get_settings_module
from smartattend.container import build_container, build_store


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(store=build_store(settings))

    created = container.batch_service.seed_demo_batches()
    if created:
        print(f"OK: Seeded {len(created)} demo batches: " + ", ".join(b.name for b in created))
    else:
        print("SKIP: Batches already exist, nothing seeded")


if __name__ == "__main__":
    main()
