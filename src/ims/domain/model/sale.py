"""Sale records — the append-only audit trail of committed sales."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ims.domain.model.item import Item


@dataclass(frozen=True)
class SaleLine:
    """One item's participation in a sale.

    Name and unit price are copied from the item at commit time and never
    change afterwards (price lock).
    """

    item_id: int
    item_name: str
    quantity: int
    unit_price: float

    @staticmethod
    def capture(item: Item, quantity: int) -> SaleLine:
        return SaleLine(
            item_id=item.id,
            item_name=item.name,
            quantity=quantity,
            unit_price=item.price,
        )

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class SaleRecord:
    """An immutable, timestamped ledger entry.

    ``total_amount`` is accumulated once when the sale is committed and
    stored; it is never recomputed from the lines.
    """

    sequence: int
    timestamp: datetime
    lines: tuple[SaleLine, ...]
    total_amount: float

    @staticmethod
    def commit(sequence: int, timestamp: datetime, lines: list[SaleLine]) -> SaleRecord:
        total = 0.0
        for line in lines:
            total += line.unit_price * line.quantity
        return SaleRecord(
            sequence=sequence,
            timestamp=timestamp,
            lines=tuple(lines),
            total_amount=total,
        )

    @property
    def units_sold(self) -> int:
        return sum(line.quantity for line in self.lines)
