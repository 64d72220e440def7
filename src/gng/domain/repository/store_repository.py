"""Abstract repository for the StoreSnapshot aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gng.domain.model.snapshot import StoreSnapshot


class StoreRepository(ABC):

    @abstractmethod
    def load(self) -> StoreSnapshot | None:
        """Return the stored snapshot, or None if absent or unreadable."""

    @abstractmethod
    def save(self, snapshot: StoreSnapshot) -> None:
        """Overwrite the stored snapshot.

        Raises PersistenceError if the write did not succeed.
        """
