"""Application service: Set Revenue Target use case."""

from __future__ import annotations

from gng.application.store import InventoryStore
from gng.domain.model.value_objects import to_decimal


class SetTargetHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, value: str) -> str:
        """Parse ``value`` and store it as the target; returns the stored amount."""
        self._store.set_target(to_decimal(value))
        return str(self._store.snapshot.target)
