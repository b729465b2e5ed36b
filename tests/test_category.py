"""Tests for category interning."""

import pytest
from pydantic import ValidationError

from warehouse.category import Category, CategoryRegistry, default_registry, display_name
from warehouse.errors import InvalidArgument


class TestCategoryRegistry:
    """Test cases for CategoryRegistry."""

    @pytest.fixture
    def registry(self):
        """Create an empty registry."""
        return CategoryRegistry()

    def test_intern_returns_same_instance(self, registry):
        """Test interning the same name twice."""
        first = registry.intern("fruit")
        second = registry.intern("fruit")

        assert first is second
        assert len(registry) == 1

    def test_intern_none_fails(self, registry):
        """Test that a missing name is rejected."""
        with pytest.raises(InvalidArgument, match="can't be null"):
            registry.intern(None)

        assert len(registry) == 0

    def test_intern_non_string_fails(self, registry):
        """Test that non-string names are rejected."""
        with pytest.raises(InvalidArgument):
            registry.intern(42)

    def test_keys_are_case_sensitive(self, registry):
        """Test that names differing only in case are distinct categories."""
        lower = registry.intern("fruit")
        upper = registry.intern("Fruit")

        assert lower is not upper
        assert lower.name == upper.name == "Fruit"
        assert lower.key == "fruit"
        assert upper.key == "Fruit"
        assert sorted(registry) == ["Fruit", "fruit"]

    def test_contains(self, registry):
        """Test membership checks use the raw name."""
        registry.intern("tools")

        assert "tools" in registry
        assert "Tools" not in registry

    def test_clear(self, registry):
        """Test clearing the registry allows new instances."""
        before = registry.intern("fruit")
        registry.clear()
        after = registry.intern("fruit")

        assert len(registry) == 1
        assert before is not after

    def test_registries_are_independent(self, registry):
        """Test separate registries don't share categories."""
        other = CategoryRegistry()

        assert registry.intern("fruit") is not other.intern("fruit")


class TestCategory:
    """Test cases for Category."""

    def test_of_uses_default_registry(self):
        """Test Category.of interns through the default registry."""
        fruit = Category.of("fruit")

        assert Category.of("fruit") is fruit
        assert "fruit" in default_registry

    def test_display_name(self):
        """Test only the first character is uppercased."""
        assert Category.of("fruit").name == "Fruit"
        assert Category.of("hOUSEHOLD goods").name == "HOUSEHOLD goods"
        assert Category.of("123abc").name == "123abc"

    def test_display_name_empty(self):
        """Test an empty name stays empty."""
        assert display_name("") == ""
        assert Category.of("").name == ""

    def test_str_and_repr(self):
        """Test string representations."""
        fruit = Category.of("fruit")

        assert str(fruit) == "Fruit"
        assert repr(fruit) == "Category('fruit')"

    def test_immutable(self):
        """Test categories can't be renamed."""
        fruit = Category.of("fruit")

        with pytest.raises(ValidationError):
            fruit.key = "vegetables"

        assert fruit.key == "fruit"

    def test_identity_equality(self):
        """Test categories with the same key from different registries differ."""
        fruit = Category.of("fruit")
        other = CategoryRegistry().intern("fruit")

        assert fruit == fruit
        assert fruit != other
        assert len({fruit, other}) == 2

    def test_hashable(self):
        """Test categories work as dictionary keys."""
        fruit = Category.of("fruit")
        counts = {fruit: 1}

        assert counts[Category.of("fruit")] == 1
