"""In-memory product catalog with interned categories."""

from .category import Category, CategoryRegistry
from .model import ProductRecord
from .catalog import Catalog, CatalogRegistry, open_catalog
from .errors import WarehouseError, InvalidArgument, DuplicateIdentity, NotFound

__all__ = [
    "Category",
    "CategoryRegistry",
    "ProductRecord",
    "Catalog",
    "CatalogRegistry",
    "open_catalog",
    "WarehouseError",
    "InvalidArgument",
    "DuplicateIdentity",
    "NotFound",
]
