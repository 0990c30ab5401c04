from __future__ import annotations

from src.school_roster.school_roster.roster.store import RosterStore
from src.school_roster.school_roster.storage.mysql_blob_store import MySQLBlobStore


class FakeCursor:
    def __init__(self, table: dict[str, bytes]):
        self._table = table
        self._rows: list[dict] = []
        self.closed = False

    def execute(self, sql: str, params=()):
        stmt = " ".join(sql.split())
        if stmt.startswith("REPLACE INTO kv_blobs"):
            key, value = params
            self._table[key] = bytes(value)
            self._rows = []
        elif stmt.startswith("SELECT blob_value FROM kv_blobs WHERE blob_key=%s"):
            (key,) = params
            self._rows = [{"blob_value": bytearray(self._table[key])}] if key in self._table else []
        elif stmt.startswith("SELECT blob_key FROM kv_blobs"):
            self._rows = [{"blob_key": k} for k in sorted(self._table)]
        else:
            raise AssertionError(f"unexpected SQL: {stmt}")

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, factory: "FakeConnFactory"):
        self._factory = factory
        self._pending: dict[str, bytes] = dict(factory.table)

    def cursor(self, dictionary: bool = True):
        return FakeCursor(self._pending)

    def commit(self):
        self._factory.table.clear()
        self._factory.table.update(self._pending)
        self._factory.commits += 1

    def rollback(self):
        self._pending = dict(self._factory.table)

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.table: dict[str, bytes] = {}
        self.commits = 0

    def connect(self, *, with_database: bool = True):
        return FakeConnection(self)


def test_get_missing_key_returns_none():
    blobs = MySQLBlobStore(FakeConnFactory())

    assert blobs.get("students") is None


def test_put_commits_each_key():
    factory = FakeConnFactory()
    blobs = MySQLBlobStore(factory)

    blobs.put("students", b"[]")
    blobs.put("teachers", b"[]")

    assert factory.commits == 2
    assert blobs.get("students") == b"[]"
    assert blobs.keys() == ["students", "teachers"]


def test_store_round_trip_over_mysql_backend():
    factory = FakeConnFactory()
    store = RosterStore(MySQLBlobStore(factory))
    store.add_student("Alice", "Grade 9")
    store.add_teacher("Mr. Brown", "Science")

    reopened = RosterStore(MySQLBlobStore(factory))

    assert reopened.students == store.students
    assert reopened.teachers == store.teachers
