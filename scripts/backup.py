"""Backup the JSON data directory.

Note: Copies every ``*.json`` collection into ``backups/<timestamp>/``. Collections
are plain files, so a copy taken while the app is writing may catch a half-written
file; stop the app first for a clean snapshot.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir.resolve()}")

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / ts
    out_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(data_dir.glob("*.json"))
    for f in files:
        shutil.copy2(f, out_dir / f.name)

    print(f"OK: Backup created: {out_dir} ({len(files)} files)")


if __name__ == "__main__":
    main()
