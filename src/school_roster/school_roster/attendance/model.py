from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for the attendance view: one person on one date."""

    id: str
    name: str
    present: bool


@dataclass(frozen=True)
class AttendanceSheet:
    date: str
    students: List[AttendanceRow]
    teachers: List[AttendanceRow]
