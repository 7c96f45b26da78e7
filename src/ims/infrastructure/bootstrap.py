"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ims.application.dispatcher import OperationDispatcher
from ims.domain.clock import Clock, SystemClock
from ims.domain.service.inventory_store import InventoryStore
from ims.domain.service.sales_ledger import SalesLedger
from ims.domain.state import LedgerState
from ims.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)
from ims.infrastructure.persistence.in_memory_sale_repository import (
    InMemorySaleRepository,
)

# CLI report defaults; overridable with IMS_REORDER_THRESHOLD / IMS_TOP_N.
DEFAULT_REORDER_THRESHOLD = 5
DEFAULT_TOP_N = 5


def build_state() -> LedgerState:
    return LedgerState(items=InMemoryItemRepository(), sales=InMemorySaleRepository())


def build_dispatcher(
    state: LedgerState | None = None,
    clock: Clock | None = None,
) -> OperationDispatcher:
    state = state if state is not None else build_state()
    inventory = InventoryStore(state)
    ledger = SalesLedger(state, clock if clock is not None else SystemClock())
    return OperationDispatcher(inventory, ledger)
