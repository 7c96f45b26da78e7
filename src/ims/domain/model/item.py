"""Item aggregate — one stocked product and its units on hand.

Items are mutated in place by updates and by sales.  Sale records never
reference the live item: they copy the name and price at commit time, so
renaming, repricing or removing an item does not rewrite history.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.value_objects import ItemName, Price, Quantity


@dataclass
class Item:
    """Aggregate root for inventory tracking.

    Invariants:
    - ``name`` is never blank
    - ``price`` is always > 0
    - ``quantity`` is always >= 0 (0 means sold out)

    Use ``Item.create()`` for new items.  The ``__init__`` stays simple so
    repositories and tests can build records directly.
    """

    id: int
    name: str
    quantity: int
    price: float

    # --- Factory (used for NEW items only) ------------------------------------

    @staticmethod
    def create(item_id: int, name: ItemName, quantity: Quantity, price: Price) -> Item:
        return Item(id=item_id, name=name.value, quantity=quantity.value, price=price.amount)

    # --- Mutations ------------------------------------------------------------

    def apply_changes(
        self,
        name: ItemName | None = None,
        quantity: Quantity | None = None,
        price: Price | None = None,
    ) -> None:
        """Overwrite the provided fields; the arguments are already validated."""
        if name is not None:
            self.name = name.value
        if quantity is not None:
            self.quantity = quantity.value
        if price is not None:
            self.price = price.amount

    def sell(self, quantity: int) -> None:
        """Take *quantity* units out of stock."""
        if quantity <= 0:
            raise ValidationError("Sale quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStockError(self.name, quantity, self.quantity)
        self.quantity -= quantity

    # --- Computed properties --------------------------------------------------

    @property
    def stock_value(self) -> float:
        return self.quantity * self.price

    def snapshot(self) -> Item:
        """Detached copy safe to hand to callers."""
        return replace(self)
