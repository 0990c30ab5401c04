from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import BlobStore

logger = logging.getLogger(__name__)


class MySQLBlobStore(BlobStore):
    """Blob store backed by the `kv_blobs` table (see database/schema.sql).

    Each `put` is one REPLACE statement committed on its own, so a value is
    either fully visible or not at all.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[bytes]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT blob_value FROM kv_blobs WHERE blob_key=%s", (key,))
            r = fetchone(cur)
            if not r:
                return None
            return bytes(r["blob_value"])

    def put(self, key: str, data: bytes) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                REPLACE INTO kv_blobs(blob_key, blob_value)
                VALUES(%s,%s)
                """,
                (key, data),
            )
        logger.debug("wrote blob %s (%d bytes) to mysql", key, len(data))

    def keys(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT blob_key FROM kv_blobs ORDER BY blob_key")
            return [str(r["blob_key"]) for r in fetchall(cur)]
