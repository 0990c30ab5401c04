from __future__ import annotations

import pytest

from src.school_roster.school_roster.core.enums import Collection
from src.school_roster.school_roster.roster.store import RosterStore
from src.school_roster.school_roster.storage.file_blob_store import FileBlobStore


def test_missing_key_returns_none(tmp_path):
    blobs = FileBlobStore(tmp_path / "data")

    assert blobs.get("students") is None
    assert blobs.keys() == []


def test_put_then_get_and_overwrite(tmp_path):
    blobs = FileBlobStore(tmp_path / "data")

    blobs.put("students", b"[]")
    blobs.put("students", b'[{"x": 1}]')

    assert blobs.get("students") == b'[{"x": 1}]'
    assert (tmp_path / "data" / "students.json").exists()


def test_put_leaves_no_temp_files(tmp_path):
    blobs = FileBlobStore(tmp_path)

    blobs.put("teachers", b"[]")
    blobs.put("students", b"[]")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["students.json", "teachers.json"]
    assert blobs.keys() == ["students", "teachers"]


def test_rejects_path_like_keys(tmp_path):
    blobs = FileBlobStore(tmp_path)

    with pytest.raises(ValueError):
        blobs.put("../escape", b"x")


def test_store_persists_through_files(tmp_path):
    store = RosterStore(FileBlobStore(tmp_path))
    s = store.add_student("John Doe", "Grade 10")
    store.mark_attendance(Collection.STUDENTS, s.id, "2025-03-15", True)

    reopened = RosterStore(FileBlobStore(tmp_path))

    assert reopened.students == store.students
    assert reopened.total_student_attendance == 1


def test_truncated_file_is_treated_as_no_data(tmp_path):
    store = RosterStore(FileBlobStore(tmp_path))
    store.add_teacher("T", "Art")
    (tmp_path / "teachers.json").write_bytes(b'[{"id": "1", "na')

    assert RosterStore(FileBlobStore(tmp_path)).teachers == []
