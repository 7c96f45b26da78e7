"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the outer layers can catch them uniformly and display user-friendly
messages.  Every one of them is raised before any state is mutated.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input is malformed (blank name, bad quantity or price...)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ItemNotFoundError(EntityNotFoundError):

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} not found")
        self.item_id = item_id


class SaleNotFoundError(EntityNotFoundError):

    def __init__(self, sequence: int) -> None:
        super().__init__(f"Sale #{sequence} not found")
        self.sequence = sequence


class InsufficientStockError(DomainException):
    """Requested quantity exceeds what is in stock.

    The caller may retry with a smaller quantity or after a restock.
    """

    def __init__(self, item_name: str, requested: int, available: int) -> None:
        super().__init__(f"Insufficient stock for item: {item_name}")
        self.item_name = item_name
        self.requested = requested
        self.available = available
