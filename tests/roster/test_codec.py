from __future__ import annotations

import json

import pytest

from src.school_roster.school_roster.core.enums import Collection
from src.school_roster.school_roster.core.exceptions import CorruptDataError
from src.school_roster.school_roster.roster.codec import decode_records, encode_records
from src.school_roster.school_roster.roster.model import Student, Teacher


def test_encoded_blob_is_a_json_list_of_records():
    s = Student(id="1", name="A", grade="Grade 9", attendance={"2025-03-15": True})

    payload = json.loads(encode_records([s]).decode("utf-8"))

    assert payload == [{"id": "1", "name": "A", "grade": "Grade 9", "attendance": {"2025-03-15": True}}]


def test_teacher_uses_subject_field():
    t = Teacher(id="1", name="A", subject="Physics")

    decoded = decode_records(Collection.TEACHERS, encode_records([t]))

    assert decoded == [t]


@pytest.mark.parametrize(
    "blob",
    [
        b"\xff\xfe",
        b"{}",
        b'[{"id": "1", "name": "A", "grade": "9"}]',
        b'[{"id": "1", "name": "A", "grade": "9", "attendance": {"2025-03-15": 1}}]',
        b'[{"id": 1, "name": "A", "grade": "9", "attendance": {}}]',
        b'[{"id": "1", "name": "A", "grade": "9", "attendance": {}}, {"id": "1", "name": "B", "grade": "9", "attendance": {}}]',
    ],
)
def test_malformed_blobs_are_corrupt(blob):
    with pytest.raises(CorruptDataError):
        decode_records(Collection.STUDENTS, blob)


def test_student_blob_is_not_a_teacher_blob():
    blob = encode_records([Student(id="1", name="A", grade="9")])

    with pytest.raises(CorruptDataError):
        decode_records(Collection.TEACHERS, blob)
