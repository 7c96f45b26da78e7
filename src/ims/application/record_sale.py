"""Application service: Record Sale use case.

Translates the caller's line specs into the ledger's ``(id, qty)`` pairs
and delegates the transaction to the SalesLedger domain service, which
either commits every line or none of them.
"""

from __future__ import annotations

import logging

from ims.application.dto import SaleLineSpec
from ims.domain.model.sale import SaleRecord
from ims.domain.service.sales_ledger import SalesLedger

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(self, ledger: SalesLedger) -> None:
        self._ledger = ledger

    def handle(self, line_specs: list[SaleLineSpec]) -> SaleRecord:
        record = self._ledger.record_sale(
            (spec.item_id, spec.quantity) for spec in line_specs
        )
        logger.info(
            "Committed sale #%d: %d line(s), %d unit(s), total %.2f",
            record.sequence,
            len(record.lines),
            record.units_sold,
            record.total_amount,
        )
        return record
