"""Shared ledger state and its exclusive-access guard.

One ``LedgerState`` owns the item map (with its ID counter) and the sale
ledger.  It is injected into both InventoryStore and SalesLedger so they
serialize against the same lock: every operation, read or write, runs
inside ``exclusive()`` and therefore appears atomic to every other caller.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ims.domain.repository.item_repository import ItemRepository
from ims.domain.repository.sale_repository import SaleRepository


class LedgerState:

    def __init__(self, items: ItemRepository, sales: SaleRepository) -> None:
        self.items = items
        self.sales = sales
        # Re-entrant so a service may call another guarded method while
        # already holding the lock.
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator[LedgerState]:
        with self._lock:
            yield self
