"""Exceptions raised by catalog operations."""


class WarehouseError(Exception):
    """Base class for all warehouse errors."""


class InvalidArgument(WarehouseError):
    """Raised when a constructor or lookup receives malformed input."""


class DuplicateIdentity(WarehouseError):
    """Raised when adding a product whose id is already in the catalog."""


class NotFound(WarehouseError):
    """Raised when an operation references an id the catalog doesn't hold."""
