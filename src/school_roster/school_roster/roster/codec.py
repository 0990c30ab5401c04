"""JSON encoding of roster collections for the blob store.

Each collection is stored as a UTF-8 JSON list, one object per record, in
sequence order. Decoding is strict about shape so that a foreign or truncated
blob is reported as corrupt instead of producing half-built records.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Sequence

from ..core.enums import Collection
from ..core.exceptions import CorruptDataError
from .model import Person, Student, Teacher


def _role_field(collection: Collection) -> str:
    return "grade" if collection == Collection.STUDENTS else "subject"


def record_to_dict(record: Person) -> dict:
    role_field = "grade" if isinstance(record, Student) else "subject"
    return {
        "id": record.id,
        "name": record.name,
        role_field: getattr(record, role_field),
        "attendance": dict(record.attendance),
    }


def encode_records(records: Sequence[Person]) -> bytes:
    payload = [record_to_dict(r) for r in records]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def _require_str(item: dict, key: str) -> str:
    value = item.get(key)
    if not isinstance(value, str):
        raise CorruptDataError(f"field {key!r} must be a string")
    return value


def _attendance(item: dict) -> dict[str, bool]:
    raw = item.get("attendance")
    if not isinstance(raw, dict):
        raise CorruptDataError("field 'attendance' must be an object")
    for date_key, present in raw.items():
        if not isinstance(present, bool):
            raise CorruptDataError(f"attendance[{date_key!r}] must be a boolean")
    return dict(raw)


def _build(collection: Collection) -> Callable[[dict], Person]:
    role_field = _role_field(collection)
    cls = Student if collection == Collection.STUDENTS else Teacher

    def build(item: dict) -> Person:
        if not isinstance(item, dict):
            raise CorruptDataError("record must be an object")
        return cls(
            _require_str(item, "id"),
            _require_str(item, "name"),
            _require_str(item, role_field),
            _attendance(item),
        )

    return build


def decode_records(collection: Collection, data: bytes) -> List[Person]:
    """Decode a blob written by `encode_records`.

    Raises CorruptDataError for anything that is not a well-formed record list.
    """

    try:
        payload: Any = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise CorruptDataError(f"{collection.value}: {e}") from e

    if not isinstance(payload, list):
        raise CorruptDataError(f"{collection.value}: expected a list of records")

    build = _build(collection)
    records = [build(item) for item in payload]

    ids = [r.id for r in records]
    if len(set(ids)) != len(ids):
        raise CorruptDataError(f"{collection.value}: duplicate record ids")
    return records
