"""Domain service: Sales Ledger.

Records multi-line sales as single atomic units against the inventory and
serves the aggregation queries that read the ledger.

The two-phase approach (validate-then-mutate) ensures a rejected sale never
leaves stock partially decremented:

  Phase 1 — look up every line in caller order and check stock, tracking
            how much earlier lines of the same request already claimed
            from each item.  Fails fast before any mutation.
  Phase 2 — decrement, snapshot the lines, stamp and append the record.

Because claims are tracked per item, a request that names the same item
on two lines behaves as if the lines were applied one after another.
"""

from __future__ import annotations

from collections.abc import Iterable

from ims.domain.clock import Clock
from ims.domain.exceptions import (
    InsufficientStockError,
    ItemNotFoundError,
    SaleNotFoundError,
    ValidationError,
)
from ims.domain.model.item import Item
from ims.domain.model.reports import FinancialOverview, TopSeller
from ims.domain.model.sale import SaleLine, SaleRecord
from ims.domain.model.value_objects import Quantity, require_int
from ims.domain.state import LedgerState


class SalesLedger:

    def __init__(self, state: LedgerState, clock: Clock) -> None:
        self._state = state
        self._clock = clock

    # --- Transaction ----------------------------------------------------------

    def record_sale(self, lines: Iterable[tuple[int, int]]) -> SaleRecord:
        """Commit a sale of ``(item_id, quantity)`` lines, all or nothing."""
        try:
            raw_lines = list(lines)
        except TypeError as exc:
            raise ValidationError("Sale lines must be a sequence of (item_id, quantity)") from exc
        requested = [self._parse_line(line) for line in raw_lines]
        if not requested:
            raise ValidationError("Sale must contain at least one line")

        with self._state.exclusive() as state:
            # Phase 1: validate every line without touching stock
            claimed: dict[int, int] = {}
            resolved: list[tuple[Item, int]] = []

            for item_id, qty in requested:
                item = state.items.get_by_id(item_id)
                if item is None:
                    raise ItemNotFoundError(item_id)
                available = item.quantity - claimed.get(item_id, 0)
                if available < qty:
                    raise InsufficientStockError(item.name, qty, available)
                claimed[item_id] = claimed.get(item_id, 0) + qty
                resolved.append((item, qty))

            # Phase 2: apply
            sale_lines: list[SaleLine] = []
            for item, qty in resolved:
                sale_lines.append(SaleLine.capture(item, qty))
                item.sell(qty)
                state.items.save(item)

            record = SaleRecord.commit(
                sequence=state.sales.next_sequence(),
                timestamp=self._clock.now(),
                lines=sale_lines,
            )
            state.sales.append(record)
            return record

    # --- Queries --------------------------------------------------------------

    def get_sales(self) -> list[SaleRecord]:
        with self._state.exclusive() as state:
            return state.sales.list_all()

    def get_sale(self, sequence: int) -> SaleRecord:
        require_int(sequence, "Sale number")
        with self._state.exclusive() as state:
            record = state.sales.get_by_sequence(sequence)
        if record is None:
            raise SaleNotFoundError(sequence)
        return record

    def financial_overview(self) -> FinancialOverview:
        """Lifetime sales revenue and the current value of stock on hand."""
        with self._state.exclusive() as state:
            total_sales = sum(
                (record.total_amount for record in state.sales.list_all()), 0.0
            )
            inventory_value = sum(
                (item.stock_value for item in state.items.list_all()), 0.0
            )
        return FinancialOverview(total_sales=total_sales, inventory_value=inventory_value)

    def get_top_selling_items(self, n: int) -> list[TopSeller]:
        """The *n* best-selling item names by cumulative units sold.

        Lines are grouped by the name captured at sale time, so different
        items sharing a name are merged.  Ties keep the order in which the
        names first appeared in the ledger.
        """
        require_int(n, "Top-N")
        if n < 0:
            raise ValidationError("Top-N cannot be negative")

        totals: dict[str, int] = {}
        with self._state.exclusive() as state:
            for record in state.sales.list_all():
                for line in record.lines:
                    totals[line.item_name] = totals.get(line.item_name, 0) + line.quantity

        # sorted() is stable, so equal quantities stay in first-seen order
        ranked = sorted(totals.items(), key=lambda pair: pair[1], reverse=True)
        return [TopSeller(name, qty) for name, qty in ranked[:n]]

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _parse_line(line: object) -> tuple[int, int]:
        try:
            item_id, qty = line  # type: ignore[misc]
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed sale line: {line!r}") from exc
        return require_int(item_id, "Item ID"), Quantity(qty).value
