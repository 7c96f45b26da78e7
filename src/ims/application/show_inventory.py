"""Application services: inventory queries."""

from __future__ import annotations

from ims.domain.model.item import Item
from ims.domain.service.inventory_store import InventoryStore


class ShowInventoryHandler:

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(self) -> list[Item]:
        return self._inventory.list_all()


class ShowItemHandler:
    """Item details; an unknown ID is reported as ``None``, not raised."""

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(self, item_id: int) -> Item | None:
        return self._inventory.find(item_id)


class SearchItemsHandler:

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(self, substring: str) -> list[Item]:
        return self._inventory.search_by_name(substring)


class ReorderSuggestionsHandler:

    def __init__(self, inventory: InventoryStore) -> None:
        self._inventory = inventory

    def handle(self, threshold: int) -> list[Item]:
        return self._inventory.reorder_suggestions(threshold)
