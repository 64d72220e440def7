"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
Storage problems are reported separately through PersistenceError.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a violated invariant."""


class EntityNotFoundError(DomainException):
    """Input references an entity that does not exist."""


class InsufficientStockError(DomainException):
    """A sale would take a product's inventory below zero."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available})"
        )


class PersistenceError(Exception):
    """The durable store could not be read or written."""
