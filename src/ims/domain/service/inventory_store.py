"""Domain service: Inventory Store.

Owns the item records: create, update, remove, lookup, search and
enumerate.  Every input is turned into a value object before any record is
touched, so a rejected call never changes the item map or the ID counter.
Reads hand out snapshot copies, never the live records.
"""

from __future__ import annotations

from ims.domain.exceptions import ItemNotFoundError, ValidationError
from ims.domain.model.item import Item
from ims.domain.model.value_objects import ItemName, Price, Quantity, require_int
from ims.domain.state import LedgerState


class InventoryStore:

    def __init__(self, state: LedgerState) -> None:
        self._state = state

    # --- Mutations ------------------------------------------------------------

    def add(self, name: str, quantity: int, price: str | float) -> int:
        """Stock a new item and return its freshly allocated ID.

        Text prices such as ``"2.50"`` are accepted and parsed.
        """
        item_name = ItemName(name)
        item_quantity = Quantity(quantity)
        item_price = Price(Price.parse(price))

        with self._state.exclusive() as state:
            item = Item.create(state.items.next_id(), item_name, item_quantity, item_price)
            state.items.save(item)
            return item.id

    def update(
        self,
        item_id: int,
        name: str | None = None,
        quantity: int | None = None,
        price: str | float | None = None,
    ) -> None:
        """Change any subset of an item's fields.

        An unknown ID is reported before any field is looked at.  Each
        provided field is then checked with the same rules as ``add``;
        either every provided change applies or none does.
        """
        require_int(item_id, "Item ID")
        with self._state.exclusive() as state:
            item = state.items.get_by_id(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)

            new_name = ItemName(name) if name is not None else None
            new_quantity = Quantity(quantity) if quantity is not None else None
            new_price = Price(Price.parse(price)) if price is not None else None

            item.apply_changes(name=new_name, quantity=new_quantity, price=new_price)
            state.items.save(item)

    def remove(self, item_id: int) -> None:
        require_int(item_id, "Item ID")
        with self._state.exclusive() as state:
            if not state.items.delete(item_id):
                raise ItemNotFoundError(item_id)

    # --- Queries --------------------------------------------------------------

    def get(self, item_id: int) -> Item:
        item = self.find(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def find(self, item_id: int) -> Item | None:
        require_int(item_id, "Item ID")
        with self._state.exclusive() as state:
            item = state.items.get_by_id(item_id)
            return item.snapshot() if item is not None else None

    def list_all(self) -> list[Item]:
        with self._state.exclusive() as state:
            return [item.snapshot() for item in state.items.list_all()]

    def search_by_name(self, substring: str) -> list[Item]:
        """Case-insensitive substring match, in insertion order."""
        if not isinstance(substring, str):
            raise ValidationError(
                f"Search text must be a string, got {type(substring).__name__}"
            )
        needle = substring.lower()
        with self._state.exclusive() as state:
            return [
                item.snapshot()
                for item in state.items.list_all()
                if needle in item.name.lower()
            ]

    def reorder_suggestions(self, threshold: int) -> list[Item]:
        """Items whose stock is strictly below *threshold*."""
        require_int(threshold, "Reorder threshold")
        if threshold < 0:
            raise ValidationError("Reorder threshold cannot be negative")

        with self._state.exclusive() as state:
            return [
                item.snapshot()
                for item in state.items.list_all()
                if item.quantity < threshold
            ]

    def inventory_value(self) -> float:
        with self._state.exclusive() as state:
            return sum((item.stock_value for item in state.items.list_all()), 0.0)
