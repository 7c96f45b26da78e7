"""Abstract repository for the Item aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations are not thread-safe on their own:
callers hold ``LedgerState.exclusive()`` around every call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate a fresh item ID.  IDs are never handed out twice."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> Item | None:
        """Return the live item record, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every live item record in insertion order."""

    @abstractmethod
    def save(self, item: Item) -> None:
        """Insert a new item or replace an existing one."""

    @abstractmethod
    def delete(self, item_id: int) -> bool:
        """Remove an item; return False if it did not exist."""
