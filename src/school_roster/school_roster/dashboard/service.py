from __future__ import annotations

from dataclasses import asdict, dataclass

from ..roster.store import RosterStore


@dataclass(frozen=True)
class DashboardSummary:
    total_students: int
    total_teachers: int
    total_student_attendance: int
    total_teacher_attendance: int

    def to_dict(self) -> dict:
        return asdict(self)


class DashboardService:
    def __init__(self, store: RosterStore):
        self._store = store

    def build_summary(self) -> DashboardSummary:
        return DashboardSummary(
            total_students=self._store.total_students,
            total_teachers=self._store.total_teachers,
            total_student_attendance=self._store.total_student_attendance,
            total_teacher_attendance=self._store.total_teacher_attendance,
        )
