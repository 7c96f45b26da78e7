"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


def require_int(value: object, label: str) -> int:
    """Reject anything that is not a plain ``int`` (``bool`` included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ItemName:
    """A non-blank item name, stored without surrounding whitespace."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Item name must be a string, got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise ValidationError("Item name is required")
        object.__setattr__(self, "value", self.value.strip())


@dataclass(frozen=True)
class Price:
    """A strictly positive unit price.

    Prices are plain floats: totals are accumulated in floating point and
    no currency rounding is applied anywhere in the ledger.
    """

    amount: float

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValidationError(
                f"Price must be a number, got {type(self.amount).__name__}"
            )
        if not math.isfinite(self.amount):
            raise ValidationError(f"Price must be finite, got {self.amount}")
        if self.amount <= 0:
            raise ValidationError("Price must be greater than zero")
        object.__setattr__(self, "amount", float(self.amount))

    @staticmethod
    def parse(amount: object) -> object:
        """Turn text such as ``"2.50"`` into a float; pass anything else through.

        Type and range checks still happen when the Price is built.
        """
        if isinstance(amount, str):
            try:
                return float(amount)
            except ValueError as exc:
                raise ValidationError(f"Invalid price: {amount!r}") from exc
        return amount


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Used both for stock levels written by add/update and for the units
    requested on a sale line: zero and negative values are rejected.
    """

    value: int

    def __post_init__(self) -> None:
        require_int(self.value, "Quantity")
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")
