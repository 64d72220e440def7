"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gng.application.store import InventoryStore
from gng.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)

DATA_FILE_ENV = "GNG_DATA_FILE"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_DATA_FILE = _DATA_DIR / "store.json"


def store_repository(data_file: Path | None = None) -> JsonStoreRepository:
    return JsonStoreRepository(data_file or DEFAULT_DATA_FILE)


def inventory_store(data_file: Path | None = None) -> InventoryStore:
    return InventoryStore(store_repository(data_file))


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
