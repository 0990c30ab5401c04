from __future__ import annotations

from typing import Optional

import pytest

from src.school_roster.school_roster.roster.store import RosterStore


class InMemoryBlobs:
    def __init__(self):
        self.data: dict[str, bytes] = {}
        self.writes: list[str] = []

    def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def put(self, key: str, data: bytes) -> None:
        self.writes.append(key)
        self.data[key] = data

    def keys(self):
        return sorted(self.data)


@pytest.fixture
def blobs() -> InMemoryBlobs:
    return InMemoryBlobs()


@pytest.fixture
def store(blobs) -> RosterStore:
    return RosterStore(blobs)
