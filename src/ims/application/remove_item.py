"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from ims.domain.service.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(self, item_id: int) -> None:
        self._inventory.remove(item_id)
        logger.info("Removed item #%d", item_id)
