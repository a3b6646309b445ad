# catalog/services/exceptions.py

"""
CATALOG SERVICE ERRORS

Centralized domain errors for the catalog store.
"""


class CatalogServiceError(Exception):
    """Base exception for all catalog service failures."""


class CatalogValidationError(CatalogServiceError):
    """Raised when product input breaks a catalog invariant (no row is written)."""


class ProductNotFoundError(CatalogServiceError):
    """Raised when an operation requires a product id that does not exist."""


class CatalogStorageError(CatalogServiceError):
    """Raised when the catalog database is unreachable or fails mid-operation."""
