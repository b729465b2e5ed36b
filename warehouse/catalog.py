"""The warehouse catalog: product records, price updates and grouping."""

import logging
from decimal import Decimal
from typing import Iterator
from uuid import UUID

from .category import Category
from .config import WarehouseSettings, get_settings
from .errors import DuplicateIdentity, InvalidArgument, NotFound
from .model import ProductRecord

logger = logging.getLogger(__name__)


def _as_uuid(value: UUID | str) -> UUID:
    """Accept product ids either as UUIDs or their string form."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise InvalidArgument(f"Invalid product id {value!r}: {e}") from e


def _parse_id(value: object) -> UUID | None:
    """Like _as_uuid, but ids that can't name a product give None."""
    if not isinstance(value, (UUID, str)):
        return None
    try:
        return _as_uuid(value)
    except InvalidArgument:
        return None


class Catalog:
    """Holds the current product records of one warehouse.

    Every catalog owns its records and its change log; nothing is shared
    between instances. Records keep their insertion order, and a price
    update keeps the product in its original position.
    """

    name: str | None

    def __init__(self, name: str | None = None):
        self.name = name
        self._records: dict[UUID, ProductRecord] = {}
        self._changed: tuple[ProductRecord, ...] = ()

    @classmethod
    def open(cls, name: str | None = None) -> "Catalog":
        """Obtain a catalog through the default registry."""
        return get_registry().open(name)

    def reset(self) -> None:
        """Drop every record and forget the last price update."""
        self._records = {}
        self._changed = ()
        logger.debug(f"Reset catalog {self.name!r}")

    def is_empty(self) -> bool:
        return not self._records

    def list_products(self) -> tuple[ProductRecord, ...]:
        return tuple(self._records.values())

    def add_product(
        self,
        id: UUID | str | None,
        name: str,
        category: Category | str,
        price: Decimal | int | str | None = None,
    ) -> ProductRecord:
        """Create a product record and add it to the catalog.

        Raises:
            InvalidArgument: If the record can't be constructed
            DuplicateIdentity: If a product with the same id already exists
        """
        if id is not None:
            id = _as_uuid(id)
            if id in self._records:
                raise DuplicateIdentity(
                    f"Product with id {id} already exists, "
                    "use update_product_price for updates."
                )

        product = ProductRecord(id=id, name=name, category=category, price=price)
        self._records[product.id] = product
        logger.debug(f"Added product {product.id} ({product.name}) to {self.name!r}")
        return product

    def find_by_id(self, id: UUID | str) -> ProductRecord | None:
        return self._records.get(_parse_id(id))

    def update_product_price(
        self, id: UUID | str, price: Decimal | int | str | None
    ) -> ProductRecord:
        """Replace a product with a revision carrying the new price.

        The record being replaced becomes the only entry of the change log.
        Returns the new revision.

        Raises:
            NotFound: If no product with that id exists
        """
        previous = self._records.get(_parse_id(id))
        if previous is None:
            raise NotFound(f"Product with id {id} doesn't exist.")

        updated = previous.with_price(price)
        self._records[previous.id] = updated
        self._changed = (previous,)

        logger.info(
            f"Updated price of {previous.name} ({previous.id}) "
            f"from {previous.price} to {updated.price}"
        )
        return updated

    def list_changed_products(self) -> tuple[ProductRecord, ...]:
        """Pre-update values captured by the most recent price update."""
        return self._changed

    def group_by_category(self) -> dict[Category, tuple[ProductRecord, ...]]:
        """Partition the current records by category."""
        groups: dict[Category, list[ProductRecord]] = {}
        for product in self._records.values():
            groups.setdefault(product.category, []).append(product)
        return {category: tuple(products) for category, products in groups.items()}

    def find_by_category(self, category: Category) -> tuple[ProductRecord, ...]:
        return tuple(p for p in self._records.values() if p.category is category)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self.list_products())

    def __contains__(self, id: object) -> bool:
        return _parse_id(id) in self._records

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        if self.name is None or other.name is None:
            return self is other
        return self.name == other.name

    def __hash__(self) -> int:
        if self.name is None:
            return object.__hash__(self)
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Catalog(name={self.name!r}, products={len(self._records)})"


class CatalogRegistry:
    """Owns the named catalogs of an application."""

    def __init__(self, settings: WarehouseSettings | None = None):
        self.settings = settings or get_settings()
        self._catalogs: dict[str, Catalog] = {}

    def open(self, name: str | None = None) -> Catalog:
        """Get a catalog.

        Without a name a new anonymous catalog is returned. With a name the
        registered instance is returned, created on first use. When
        ``reset_on_open`` is set, a reused named catalog is emptied first.
        """
        if name is None:
            return Catalog()

        catalog = self._catalogs.get(name)
        if catalog is None:
            catalog = Catalog(name)
            self._catalogs[name] = catalog
            logger.info(f"Created catalog {name!r}")
        elif self.settings.reset_on_open:
            catalog.reset()
        return catalog

    def names(self) -> list[str]:
        return list(self._catalogs)

    def clear(self) -> None:
        self._catalogs.clear()


_default_registry: CatalogRegistry | None = None


def get_registry() -> CatalogRegistry:
    """Get the process-wide catalog registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CatalogRegistry()
    return _default_registry


def open_catalog(name: str | None = None) -> Catalog:
    return get_registry().open(name)
