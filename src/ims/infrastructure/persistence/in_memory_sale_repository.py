"""List-backed, append-only implementation of SaleRepository."""

from __future__ import annotations

from ims.domain.model.sale import SaleRecord
from ims.domain.repository.sale_repository import SaleRepository


class InMemorySaleRepository(SaleRepository):

    def __init__(self) -> None:
        self._records: list[SaleRecord] = []

    def next_sequence(self) -> int:
        return len(self._records) + 1

    def append(self, record: SaleRecord) -> None:
        if record.sequence != self.next_sequence():
            raise ValueError(
                f"Out-of-order sale #{record.sequence}, expected #{self.next_sequence()}"
            )
        self._records.append(record)

    def get_by_sequence(self, sequence: int) -> SaleRecord | None:
        if 1 <= sequence <= len(self._records):
            return self._records[sequence - 1]
        return None

    def list_all(self) -> list[SaleRecord]:
        return list(self._records)
