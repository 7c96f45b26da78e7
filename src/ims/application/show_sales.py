"""Application services: sale ledger queries."""

from __future__ import annotations

from ims.domain.model.sale import SaleRecord
from ims.domain.service.sales_ledger import SalesLedger


class ShowSalesHandler:

    def __init__(self, ledger: SalesLedger) -> None:
        self._ledger = ledger

    def handle(self) -> list[SaleRecord]:
        return self._ledger.get_sales()


class ShowSaleHandler:

    def __init__(self, ledger: SalesLedger) -> None:
        self._ledger = ledger

    def handle(self, sequence: int) -> SaleRecord:
        return self._ledger.get_sale(sequence)
