from __future__ import annotations

import threading
from typing import Callable, Iterable, List, Optional, Sequence

from ..core.enums import Collection, RosterEvent
from ..core.exceptions import CorruptDataError, InvalidArgumentError, NotFoundError
from ..storage.repository import BlobStore
from .codec import decode_records, encode_records
from .model import Person, Student, Teacher, new_record_id

Observer = Callable[[RosterEvent, Collection], None]


class RosterStore:
    """Authoritative in-memory roster mirrored to a blob store.

    Every mutation persists both collections before returning and then
    notifies subscribed observers. Readers get copies, so records can only be
    changed through the store. One re-entrant lock guards the whole store,
    which keeps it safe behind a threaded WSGI server.
    """

    def __init__(self, blobs: BlobStore, *, autoload: bool = True):
        self._blobs = blobs
        self._lock = threading.RLock()
        self._records: dict[Collection, List[Person]] = {
            Collection.STUDENTS: [],
            Collection.TEACHERS: [],
        }
        self._observers: List[Observer] = []
        if autoload:
            self.load()

    # ----- reads -----

    @property
    def students(self) -> List[Student]:
        return self.records(Collection.STUDENTS)  # type: ignore[return-value]

    @property
    def teachers(self) -> List[Teacher]:
        return self.records(Collection.TEACHERS)  # type: ignore[return-value]

    def records(self, collection: Collection) -> List[Person]:
        with self._lock:
            return [r.copy() for r in self._records[collection]]

    # ----- aggregates -----

    @property
    def total_students(self) -> int:
        with self._lock:
            return len(self._records[Collection.STUDENTS])

    @property
    def total_teachers(self) -> int:
        with self._lock:
            return len(self._records[Collection.TEACHERS])

    @property
    def total_student_attendance(self) -> int:
        return self.total_attendance(Collection.STUDENTS)

    @property
    def total_teacher_attendance(self) -> int:
        return self.total_attendance(Collection.TEACHERS)

    def total_attendance(self, collection: Collection) -> int:
        """Number of present marks ever recorded, over all people and dates."""
        with self._lock:
            return sum(r.present_count() for r in self._records[collection])

    # ----- mutations -----

    def add_student(self, name: str, grade: str) -> Student:
        student = Student(id=new_record_id(), name=name, grade=grade, attendance={})
        self._append(Collection.STUDENTS, student)
        return student.copy()

    def add_teacher(self, name: str, subject: str) -> Teacher:
        teacher = Teacher(id=new_record_id(), name=name, subject=subject, attendance={})
        self._append(Collection.TEACHERS, teacher)
        return teacher.copy()

    def mark_attendance(self, collection: Collection, record_id: str, date_key: str, is_present: bool) -> bool:
        """Set attendance[date_key] for one record.

        An unknown id is a silent no-op; the return value tells whether a
        record was updated.
        """

        with self._lock:
            record = self._find(collection, record_id)
            if record is None:
                return False
            record.attendance[date_key] = bool(is_present)
            self.save()
        self._notify(RosterEvent.MARKED, collection)
        return True

    def mark_attendance_strict(self, collection: Collection, record_id: str, date_key: str, is_present: bool) -> None:
        if not self.mark_attendance(collection, record_id, date_key, is_present):
            raise NotFoundError(f"No {collection.value} record with id {record_id!r}")

    def delete_at(self, collection: Collection, positions: Iterable[int]) -> None:
        """Remove records at the given zero-based positions in one step.

        Positions refer to the sequence as it was before the call. Any position
        outside the current bounds raises InvalidArgumentError and nothing is
        removed. Non-integer positions are rejected the same way.
        """

        with self._lock:
            current = self._records[collection]
            doomed = set(positions)
            # bool is an int subclass; reject it explicitly
            wrong_type = [p for p in doomed if isinstance(p, bool) or not isinstance(p, int)]
            if wrong_type:
                raise InvalidArgumentError(f"positions must be integers, got {wrong_type!r}")
            bad = sorted(p for p in doomed if p < 0 or p >= len(current))
            if bad:
                raise InvalidArgumentError(
                    f"positions {bad} out of range for {collection.value} (size {len(current)})"
                )
            self._records[collection] = [r for i, r in enumerate(current) if i not in doomed]
            self.save()
        self._notify(RosterEvent.DELETED, collection)

    # ----- persistence -----

    def save(self) -> None:
        """Write both collections; each key independently of the other.

        If one key fails the other is still attempted and the first error is
        re-raised afterwards.
        """

        first_error: Optional[Exception] = None
        with self._lock:
            for collection in Collection:
                try:
                    self._blobs.put(collection.value, encode_records(self._records[collection]))
                except Exception as e:
                    if first_error is None:
                        first_error = e
        if first_error is not None:
            raise first_error

    def load(self, *, strict: bool = False) -> None:
        """Replace each collection with its persisted snapshot, if any.

        A missing key leaves the collection as it is. An undecodable blob is
        treated the same way unless `strict` is set, in which case
        CorruptDataError is raised and no collection is replaced.
        """

        with self._lock:
            decoded: dict[Collection, List[Person]] = {}
            for collection in Collection:
                data = self._blobs.get(collection.value)
                if data is None:
                    continue
                try:
                    decoded[collection] = decode_records(collection, data)
                except CorruptDataError:
                    if strict:
                        raise
            self._records.update(decoded)

        for collection in decoded:
            self._notify(RosterEvent.LOADED, collection)

    # ----- observers -----

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register `observer(event, collection)`; returns an unsubscribe callable."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    # ----- internals -----

    def _find(self, collection: Collection, record_id: str) -> Optional[Person]:
        for r in self._records[collection]:
            if r.id == record_id:
                return r
        return None

    def _append(self, collection: Collection, record: Person) -> None:
        with self._lock:
            self._records[collection].append(record)
            self.save()
        self._notify(RosterEvent.ADDED, collection)

    def _notify(self, event: RosterEvent, collection: Collection) -> None:
        with self._lock:
            observers: Sequence[Observer] = list(self._observers)
        for observer in observers:
            observer(event, collection)
