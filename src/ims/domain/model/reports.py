"""Read-only report values derived from the ledger and the stock."""

from __future__ import annotations

from typing import NamedTuple


class FinancialOverview(NamedTuple):
    total_sales: float
    inventory_value: float


class TopSeller(NamedTuple):
    name: str
    quantity: int
