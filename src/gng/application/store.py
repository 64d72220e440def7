"""Application service: the inventory store.

The store holds the one live StoreSnapshot for a session and is the only
writer of it. Every mutation follows the same path: validate against the
current snapshot, build the next one, persist it (best effort), then
notify subscribers. A failed validation changes nothing.

Persistence is deliberately best effort. A PersistenceError from the
repository is logged and the in-memory snapshot stays authoritative for
the rest of the session.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable

from gng.domain.exceptions import PersistenceError
from gng.domain.model.product import Product
from gng.domain.model.sale import Sale, SaleItem
from gng.domain.model.snapshot import StoreSnapshot
from gng.domain.repository.store_repository import StoreRepository
from gng.domain.service.metrics import StoreMetrics, compute_metrics

logger = logging.getLogger(__name__)

Listener = Callable[[StoreSnapshot], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InventoryStore:

    def __init__(
        self,
        repository: StoreRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._snapshot: StoreSnapshot | None = None
        self._listeners: list[Listener] = []

    # --- Reads ----------------------------------------------------------------

    @property
    def snapshot(self) -> StoreSnapshot:
        """The current snapshot, loaded from the repository on first access."""
        if self._snapshot is None:
            self._snapshot = self._load()
        return self._snapshot

    @property
    def metrics(self) -> StoreMetrics:
        return compute_metrics(self.snapshot)

    def get_product_by_id(self, product_id: str) -> Product | None:
        return self.snapshot.get_product(product_id)

    def get_product_by_name(self, name: str) -> Product | None:
        return self.snapshot.find_product_by_name(name)

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Mutations ------------------------------------------------------------

    def upsert_product(self, product: Product) -> None:
        self._commit(self.snapshot.upsert_product(product))
        logger.info("Saved product %s (%s)", product.id, product.name)

    def add_inventory(self, product_id: str, quantity: int) -> None:
        self._commit(self.snapshot.adjust_inventory(product_id, quantity))
        logger.info("Adjusted inventory of %s by %d", product_id, quantity)

    def set_target(self, value: int | float | str | Decimal) -> None:
        self._commit(self.snapshot.with_target(value))
        logger.info("Revenue target set to %s", self.snapshot.target)

    def record_sale(self, items: Iterable[SaleItem]) -> Sale:
        next_snapshot, sale = self.snapshot.record_sale(items, self._clock())
        self._commit(next_snapshot)
        logger.info(
            "Recorded %s: %d unit(s), revenue %s, cost %s",
            sale.id, sale.units, sale.revenue, sale.cost,
        )
        return sale

    # --- Internal helpers -----------------------------------------------------

    def _load(self) -> StoreSnapshot:
        snapshot = self._repository.load()
        if snapshot is None:
            logger.info("No stored snapshot, starting from the default catalogue")
            return StoreSnapshot.default()
        logger.info(
            "Loaded %d product(s) and %d sale(s)",
            len(snapshot.products), len(snapshot.sales),
        )
        return snapshot

    def _commit(self, snapshot: StoreSnapshot) -> None:
        self._snapshot = snapshot
        try:
            self._repository.save(snapshot)
        except PersistenceError as exc:
            logger.warning("Could not persist store, keeping it in memory: %s", exc)
        for listener in list(self._listeners):
            logger.debug("Notifying %r", listener)
            listener(snapshot)
