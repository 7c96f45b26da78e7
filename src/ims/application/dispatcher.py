"""Operation dispatcher — the call-based interface to the ledger.

An outer layer (a CLI, an RPC endpoint...) names an operation and passes
keyword arguments; the dispatcher routes the call to the matching use-case
handler and returns its result.  Domain errors propagate unchanged so the
caller can map them to its own responses.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from ims.application.add_item import AddItemHandler
from ims.application.dto import SaleLineSpec
from ims.application.financial_overview import (
    FinancialOverviewHandler,
    TopSellingItemsHandler,
)
from ims.application.record_sale import RecordSaleHandler
from ims.application.remove_item import RemoveItemHandler
from ims.application.show_inventory import (
    ReorderSuggestionsHandler,
    SearchItemsHandler,
    ShowInventoryHandler,
    ShowItemHandler,
)
from ims.application.show_sales import ShowSaleHandler, ShowSalesHandler
from ims.application.update_item import UpdateItemHandler
from ims.domain.exceptions import DomainException, ValidationError
from ims.domain.service.inventory_store import InventoryStore
from ims.domain.service.sales_ledger import SalesLedger

logger = logging.getLogger(__name__)


class UnknownOperationError(DomainException):
    """The requested operation name is not part of the interface."""


class OperationDispatcher:

    def __init__(self, inventory: InventoryStore, ledger: SalesLedger) -> None:
        record_sale = RecordSaleHandler(ledger)

        def _record_sale(items: list) -> Any:
            try:
                specs = [SaleLineSpec.from_raw(raw) for raw in items]
            except (KeyError, TypeError, ValueError) as exc:
                raise ValidationError(f"Malformed sale line: {exc}") from exc
            return record_sale.handle(specs)

        self._operations: dict[str, Callable[..., Any]] = {
            "add_item": AddItemHandler(inventory).handle,
            "update_item": UpdateItemHandler(inventory).handle,
            "remove_item": RemoveItemHandler(inventory).handle,
            "record_sale": _record_sale,
            "get_inventory": ShowInventoryHandler(inventory).handle,
            "get_item_details": ShowItemHandler(inventory).handle,
            "search_item_by_name": SearchItemsHandler(inventory).handle,
            "get_sales": ShowSalesHandler(ledger).handle,
            "get_sale": ShowSaleHandler(ledger).handle,
            "financial_overview": FinancialOverviewHandler(ledger).handle,
            "reorder_suggestions": ReorderSuggestionsHandler(inventory).handle,
            "get_top_selling_items": TopSellingItemsHandler(ledger).handle,
        }

    @property
    def operations(self) -> list[str]:
        return sorted(self._operations)

    def dispatch(self, operation: str, **kwargs: Any) -> Any:
        handler = self._operations.get(operation)
        if handler is None:
            raise UnknownOperationError(f"Unknown operation: '{operation}'")

        try:
            inspect.signature(handler).bind(**kwargs)
        except TypeError as exc:
            raise ValidationError(f"Bad arguments for {operation}: {exc}") from exc

        try:
            result = handler(**kwargs)
        except DomainException as exc:
            logger.info("%s rejected: %s", operation, exc)
            raise
        logger.debug("%s ok", operation)
        return result
