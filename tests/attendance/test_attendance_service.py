from __future__ import annotations

from datetime import date

import pytest

from src.school_roster.school_roster.attendance.model import AttendanceRow
from src.school_roster.school_roster.attendance.service import AttendanceService
from src.school_roster.school_roster.core.enums import Collection
from src.school_roster.school_roster.core.exceptions import ValidationError


def test_sheet_defaults_unmarked_people_to_absent(store):
    a = store.add_student("Lily", "Grade 11")
    t = store.add_teacher("Prof. Adams", "Physics")
    store.mark_attendance(Collection.STUDENTS, a.id, "2025-03-15", True)

    sheet = AttendanceService(store).get_sheet("2025-03-15")

    assert sheet.date == "2025-03-15"
    assert sheet.students == [AttendanceRow(id=a.id, name="Lily", present=True)]
    assert sheet.teachers == [AttendanceRow(id=t.id, name="Prof. Adams", present=False)]


def test_sheet_is_per_date(store):
    a = store.add_student("Lily", "Grade 11")
    store.mark_attendance(Collection.STUDENTS, a.id, "2025-03-15", True)

    sheet = AttendanceService(store).get_sheet("2025-03-16")

    assert sheet.students[0].present is False


def test_mark_normalizes_date_key(store):
    a = store.add_student("Jake", "Grade 8")
    svc = AttendanceService(store)

    assert svc.mark(Collection.STUDENTS, a.id, "2025-3-5", True) is True

    assert store.students[0].attendance == {"2025-03-05": True}


@pytest.mark.parametrize("value", ["15/03/2025", "2025-02-30", "   "])
def test_mark_rejects_malformed_dates(store, value):
    a = store.add_student("Jake", "Grade 8")

    with pytest.raises(ValidationError):
        AttendanceService(store).mark(Collection.STUDENTS, a.id, value, True)

    assert store.students[0].attendance == {}


def test_mark_unknown_id_returns_false(store):
    assert AttendanceService(store).mark(Collection.TEACHERS, "missing", "2025-03-15", True) is False


def test_resolve_date_key_defaults_to_today(store):
    svc = AttendanceService(store)

    assert svc.resolve_date_key(None, today=date(2025, 3, 15)) == "2025-03-15"
    assert svc.resolve_date_key("", today=date(2025, 3, 15)) == "2025-03-15"
