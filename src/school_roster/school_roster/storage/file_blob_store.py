from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from ..core.constants import BLOB_FILE_SUFFIX
from .repository import BlobStore

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileBlobStore(BlobStore):
    """One file per key inside `data_dir`.

    Writes go to a temp file in the same directory followed by `os.replace`,
    which is atomic on POSIX and Windows for files on one volume.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid blob key: {key!r}")
        return self._dir / f"{key}{BLOB_FILE_SUFFIX}"

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None

    def put(self, key: str, data: bytes) -> None:
        path = self._path(key)
        self._dir.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._dir)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("wrote blob %s (%d bytes) to %s", key, len(data), path)

    def keys(self) -> Sequence[str]:
        if not self._dir.exists():
            return []
        return sorted(p.name[: -len(BLOB_FILE_SUFFIX)] for p in self._dir.glob(f"*{BLOB_FILE_SUFFIX}"))
