from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, Union


def new_record_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Student:
    """Domain entity: Student.

    Note: Plain data object (no persistence code). `attendance` maps a
    YYYY-MM-DD key to present (True) / absent (False).
    """

    id: str
    name: str
    grade: str
    attendance: Dict[str, bool] = field(default_factory=dict)

    def present_count(self) -> int:
        return sum(1 for present in self.attendance.values() if present)

    def copy(self) -> "Student":
        return Student(id=self.id, name=self.name, grade=self.grade, attendance=dict(self.attendance))


@dataclass
class Teacher:
    """Domain entity: Teacher."""

    id: str
    name: str
    subject: str
    attendance: Dict[str, bool] = field(default_factory=dict)

    def present_count(self) -> int:
        return sum(1 for present in self.attendance.values() if present)

    def copy(self) -> "Teacher":
        return Teacher(id=self.id, name=self.name, subject=self.subject, attendance=dict(self.attendance))


Person = Union[Student, Teacher]
