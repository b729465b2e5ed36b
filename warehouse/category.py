"""Interned product categories."""

import logging
from typing import Iterator

from pydantic import BaseModel, ConfigDict

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def display_name(key: str) -> str:
    """Uppercase the first character of a category key, leaving the rest alone."""
    return key[:1].upper() + key[1:]


class Category(BaseModel):
    """A product grouping, canonical per raw name within a registry.

    Instances should be obtained through ``Category.of`` or a
    ``CategoryRegistry``; building one directly bypasses interning.
    Categories compare by identity, so equal keys from different
    registries are different categories.
    """

    model_config = ConfigDict(frozen=True)

    key: str

    @property
    def name(self) -> str:
        return display_name(self.key)

    @classmethod
    def of(cls, name: str) -> "Category":
        """Return the canonical category for ``name`` from the default registry."""
        return default_registry.intern(name)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return object.__hash__(self)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Category({self.key!r})"


class CategoryRegistry:
    """Maps raw category names to a single Category instance each."""

    def __init__(self):
        self._categories: dict[str, Category] = {}

    def intern(self, name: str) -> Category:
        """Get the category registered under ``name``, creating it if needed.

        Lookup is by exact, case-sensitive name.
        """
        if name is None:
            raise InvalidArgument("Category name can't be null")
        if not isinstance(name, str):
            raise InvalidArgument(
                f"Category name must be a string, not {type(name).__name__}"
            )

        category = self._categories.get(name)
        if category is None:
            category = Category(key=name)
            self._categories[name] = category
            logger.debug(f"Registered category {name!r}")
        return category

    def clear(self) -> None:
        """Forget every registered category."""
        self._categories.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._categories

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)


default_registry = CategoryRegistry()
