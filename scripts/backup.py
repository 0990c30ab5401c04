"""Backup roster blobs.

Note: Works for both backends (file / mysql). Each blob is written as-is to
`backups/<key>_<timestamp>.json`, so a backup can be restored by copying the
files back into DATA_DIR.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_roster.school_roster.container import build_blob_store


def backup_blobs(blobs, out_dir: Path, *, now: datetime | None = None) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")

    written = []
    for key in blobs.keys():
        data = blobs.get(key)
        if data is None:
            continue
        out_file = out_dir / f"{key}_{ts}.json"
        out_file.write_bytes(data)
        written.append(out_file)
    return written


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    blobs = build_blob_store(
        blob_backend=getattr(settings, "BLOB_BACKEND", "file"),
        data_dir=getattr(settings, "DATA_DIR", "data"),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    out_dir = REPO_ROOT / "backups"
    written = backup_blobs(blobs, out_dir)
    if not written:
        raise SystemExit("Nothing to back up: the blob store is empty.")
    for path in written:
        print(f"OK: Backup created: {path}")


if __name__ == "__main__":
    main()
