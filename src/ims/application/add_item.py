"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from ims.domain.service.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(self, name: str, quantity: int, price: str | float) -> int:
        """Stock a new item and return its ID."""
        item_id = self._inventory.add(name, quantity, price)
        logger.info("Added item #%d %r (qty=%d)", item_id, name.strip(), quantity)
        return item_id
