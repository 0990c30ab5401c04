from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DATA_DIR
from .core.enums import BlobBackend
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .roster.store import RosterStore
from .storage.file_blob_store import FileBlobStore
from .storage.mysql_blob_store import MySQLBlobStore
from .storage.repository import BlobStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    blobs: BlobStore
    roster_store: RosterStore

    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_blob_store(*, blob_backend: str, data_dir: str | Path = DEFAULT_DATA_DIR, db_config: Optional[dict] = None) -> BlobStore:
    backend = BlobBackend(blob_backend)
    if backend == BlobBackend.MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql blob backend")
        return MySQLBlobStore(DatabaseConnection(DBConfig.from_dict(db_config)))

    return FileBlobStore(data_dir)


def build_container(
    *,
    blob_backend: str = BlobBackend.FILE.value,
    data_dir: str | Path = DEFAULT_DATA_DIR,
    db_config: Optional[dict] = None,
    blobs: Optional[BlobStore] = None,
) -> Container:
    if blobs is None:
        blobs = build_blob_store(blob_backend=blob_backend, data_dir=data_dir, db_config=db_config)

    roster_store = RosterStore(blobs)
    logger.info(
        "roster loaded: %d students, %d teachers",
        roster_store.total_students,
        roster_store.total_teachers,
    )

    attendance_service = AttendanceService(roster_store)
    dashboard_service = DashboardService(roster_store)

    return Container(
        blobs=blobs,
        roster_store=roster_store,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )
