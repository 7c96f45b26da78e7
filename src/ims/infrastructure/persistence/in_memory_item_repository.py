"""Dict-backed implementation of ItemRepository."""

from __future__ import annotations

from ims.domain.model.item import Item
from ims.domain.repository.item_repository import ItemRepository


class InMemoryItemRepository(ItemRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[int, Item] = {}
        self._next_id = 1
        for item in items or []:
            self.save(item)

    # --- ItemRepository interface ---------------------------------------------

    def next_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def get_by_id(self, item_id: int) -> Item | None:
        return self._store.get(item_id)

    def list_all(self) -> list[Item]:
        return list(self._store.values())

    def save(self, item: Item) -> None:
        self._store[item.id] = item
        # Seeded records must not collide with later allocations
        if item.id >= self._next_id:
            self._next_id = item.id + 1

    def delete(self, item_id: int) -> bool:
        return self._store.pop(item_id, None) is not None
