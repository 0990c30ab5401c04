from __future__ import annotations

from typing import Optional, Protocol, Sequence


class BlobStore(Protocol):
    """Durable key-value blob store interface.

    Note (DIP): RosterStore depends on this interface, not on a concrete backend.
    Every `put` must be atomic per key: a reader never sees a half-written value.
    """

    def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def put(self, key: str, data: bytes) -> None:
        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError
