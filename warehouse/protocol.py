from typing import Mapping, Protocol, Sequence, runtime_checkable
from uuid import UUID
from decimal import Decimal

from .category import Category
from .model import ProductRecord


@runtime_checkable
class ProductStore(Protocol):
    def add_product(
        self,
        id: UUID | str | None,
        name: str,
        category: Category | str,
        price: Decimal | int | str | None = None,
    ) -> ProductRecord: ...
    def find_by_id(self, id: UUID | str) -> ProductRecord | None: ...
    def list_products(self) -> Sequence[ProductRecord]: ...
    def group_by_category(self) -> Mapping[Category, Sequence[ProductRecord]]: ...
