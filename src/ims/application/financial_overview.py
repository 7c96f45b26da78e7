"""Application services: financial reports (query)."""

from __future__ import annotations

from ims.domain.model.reports import FinancialOverview, TopSeller
from ims.domain.service.sales_ledger import SalesLedger


class FinancialOverviewHandler:

    def __init__(self, ledger: SalesLedger) -> None:
        self._ledger = ledger

    def handle(self) -> FinancialOverview:
        return self._ledger.financial_overview()


class TopSellingItemsHandler:

    def __init__(self, ledger: SalesLedger) -> None:
        self._ledger = ledger

    def handle(self, n: int) -> list[TopSeller]:
        return self._ledger.get_top_selling_items(n)
