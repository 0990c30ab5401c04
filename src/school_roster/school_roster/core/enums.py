from __future__ import annotations

from enum import Enum

from .constants import STUDENTS_KEY, TEACHERS_KEY


class Collection(str, Enum):
    """Which roster sequence an operation targets.

    The value doubles as the blob store key the sequence is persisted under.
    """

    STUDENTS = STUDENTS_KEY
    TEACHERS = TEACHERS_KEY


class BlobBackend(str, Enum):
    FILE = "file"
    MYSQL = "mysql"


class RosterEvent(str, Enum):
    """What changed, passed to store observers."""

    ADDED = "ADDED"
    MARKED = "MARKED"
    DELETED = "DELETED"
    LOADED = "LOADED"
