"""Abstract repository for committed SaleRecords (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.sale import SaleRecord


class SaleRepository(ABC):

    @abstractmethod
    def next_sequence(self) -> int:
        """Return the sequence number the next appended record will get."""

    @abstractmethod
    def append(self, record: SaleRecord) -> None:
        """Append a committed record.  Records are never updated or removed."""

    @abstractmethod
    def get_by_sequence(self, sequence: int) -> SaleRecord | None:
        """Return a record by its ledger position, or None."""

    @abstractmethod
    def list_all(self) -> list[SaleRecord]:
        """Return every record in append order."""
