"""Application service: Update Item use case."""

from __future__ import annotations

import logging

from ims.domain.service.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


class UpdateItemHandler:

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(
        self,
        item_id: int,
        name: str | None = None,
        quantity: int | None = None,
        price: str | float | None = None,
    ) -> None:
        """Update any subset of an item's name, quantity and price.

        This does NOT affect recorded sales — they captured a name and
        price snapshot at commit time.
        """
        self._inventory.update(item_id, name=name, quantity=quantity, price=price)
        logger.info("Updated item #%d", item_id)
