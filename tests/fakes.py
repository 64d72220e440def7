"""In-memory fake repository and helpers for testing.

The fake implements the same abstract interface as the JSON repository
but keeps the snapshot in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime, timezone

from gng.application.store import InventoryStore
from gng.domain.exceptions import PersistenceError
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.repository.store_repository import StoreRepository

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeStoreRepository(StoreRepository):

    def __init__(
        self,
        snapshot: StoreSnapshot | None = None,
        fail_saves: bool = False,
    ) -> None:
        self._stored = snapshot
        self.fail_saves = fail_saves
        self.saves: list[StoreSnapshot] = []
        self.loads = 0

    def load(self) -> StoreSnapshot | None:
        self.loads += 1
        return self._stored

    def save(self, snapshot: StoreSnapshot) -> None:
        if self.fail_saves:
            raise PersistenceError("disk unavailable")
        self._stored = snapshot
        self.saves.append(snapshot)


class FakeClock:
    """Returns ``now``; tests move time by assigning to it."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_store(
    snapshot: StoreSnapshot | None = None,
    fail_saves: bool = False,
) -> tuple[InventoryStore, FakeStoreRepository]:
    """Build a store over a fake repository with a fixed clock."""
    repo = FakeStoreRepository(snapshot, fail_saves=fail_saves)
    return InventoryStore(repo, clock=FakeClock()), repo
