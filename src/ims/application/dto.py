"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaleLineSpec:
    """Input: one requested sale line (item ID + units)."""

    item_id: int
    quantity: int

    @staticmethod
    def from_raw(raw: object) -> SaleLineSpec:
        """Accept ``[id, qty]`` pairs or ``{"item_id": .., "quantity": ..}``."""
        if isinstance(raw, dict):
            return SaleLineSpec(item_id=raw["item_id"], quantity=raw["quantity"])
        item_id, quantity = raw  # type: ignore[misc]
        return SaleLineSpec(item_id=item_id, quantity=quantity)
