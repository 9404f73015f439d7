from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.worklog_portal.worklog_portal.storage.bootstrap import initialize_collections
from src.worklog_portal.worklog_portal.storage.json_file_store import JsonFileStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = JsonFileStore(Path(settings.DATA_DIR))

    created = initialize_collections(store)
    if created:
        print(f"OK: Initialized {', '.join(created)} -> {store.data_dir.resolve()}")
    else:
        print(f"OK: All collections already present in {store.data_dir.resolve()}")


if __name__ == "__main__":
    main()
