from decimal import Decimal
from typing import Any, Mapping
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .category import Category
from .errors import InvalidArgument


class ProductRecord(BaseModel):
    """One product at a point in time.

    Records are immutable; a price change produces a new record carrying the
    same ``id``. Two records describe the same product when their ids match
    (see ``same_product``), while ``==`` compares every field.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    category: Category = Field(strict=True)
    price: Decimal

    @model_validator(mode="before")
    @classmethod
    def _check_required_and_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        name = data.get("name")
        if name is None or name == "":
            raise InvalidArgument("Product name can't be null or empty.")
        if data.get("category") is None:
            raise InvalidArgument("Category can't be null.")
        if data.get("id") is None:
            data["id"] = uuid4()
        if data.get("price") is None:
            data["price"] = Decimal(0)
        return data

    @field_validator("category", mode="before")
    @classmethod
    def _intern_category(cls, value: Any) -> Category:
        if isinstance(value, Category):
            return value
        if isinstance(value, str):
            return Category.of(value)
        # {"key": ...} as produced by model_dump()
        if isinstance(value, Mapping) and isinstance(value.get("key"), str):
            return Category.of(value["key"])
        raise InvalidArgument(
            f"Category must be a Category or a category name, not {type(value).__name__}"
        )

    @field_validator("price")
    @classmethod
    def _check_price(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise InvalidArgument(f"Price can't be negative: {value}")
        return value

    def with_price(self, price: Decimal | None) -> "ProductRecord":
        """Return a new revision of this product with a different price."""
        return ProductRecord(
            id=self.id, name=self.name, category=self.category, price=price
        )

    def same_product(self, other: "ProductRecord") -> bool:
        return self.id == other.id
