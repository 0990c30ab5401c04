from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import format_date_key, today_local
from ..common.validators import require_date_key
from ..core.enums import Collection
from ..roster.store import RosterStore
from .model import AttendanceRow, AttendanceSheet


class AttendanceService:
    """Use case: daily attendance view.

    Dates are normalized to YYYY-MM-DD here, at the boundary, so the store
    can treat date keys as opaque strings.
    """

    def __init__(self, store: RosterStore):
        self._store = store

    def resolve_date_key(self, value: Optional[str] = None, *, today: Optional[date] = None) -> str:
        if value is None or value == "":
            return format_date_key(today or today_local())
        return require_date_key(value)

    def get_sheet(self, date_key: Optional[str] = None) -> AttendanceSheet:
        key = self.resolve_date_key(date_key)
        return AttendanceSheet(
            date=key,
            students=self._rows(Collection.STUDENTS, key),
            teachers=self._rows(Collection.TEACHERS, key),
        )

    def mark(self, collection: Collection, record_id: str, date_value: str, is_present: bool) -> bool:
        key = require_date_key(date_value)
        return self._store.mark_attendance(collection, record_id, key, is_present)

    def _rows(self, collection: Collection, date_key: str) -> list[AttendanceRow]:
        # Unmarked dates show as absent.
        return [
            AttendanceRow(id=r.id, name=r.name, present=r.attendance.get(date_key, False))
            for r in self._store.records(collection)
        ]
