"""Tests for cart collection operations."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.models import Cart, CartItem, Product
from storefront.services import cart as cart_ops


class TestMerge:
    def test_merge_into_empty_cart(self, headphones):
        """A new product becomes a new line copying catalog data."""
        cart = cart_ops.merge(Cart(), headphones, quantity=2, variant="Black")

        assert len(cart.items) == 1
        item = cart.items[0]
        assert item.id == "item1"
        assert item.name == "Wireless Headphones"
        assert item.unit_price == Decimal("199.99")
        assert item.quantity == 2
        assert item.variant == "Black"

    def test_same_key_sums_quantity(self, headphones):
        """Two adds of the same (id, variant) give one line."""
        cart = cart_ops.merge(Cart(), headphones, quantity=1, variant="Black")
        cart = cart_ops.merge(cart, headphones, quantity=3, variant="Black")

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 4

    def test_different_variant_appends(self, headphones):
        cart = cart_ops.merge(Cart(), headphones, variant="Black")
        cart = cart_ops.merge(cart, headphones, variant="White")

        assert [item.variant for item in cart.items] == ["Black", "White"]

    def test_no_variant_is_its_own_key(self, headphones):
        """A variant-less add does not merge into a variant line."""
        cart = cart_ops.merge(Cart(), headphones, variant="Black")
        cart = cart_ops.merge(cart, headphones)

        assert len(cart.items) == 2
        assert cart.items[1].variant is None

    def test_arrival_order_preserved(self, sample_cart, toothbrush):
        cart = cart_ops.merge(sample_cart, toothbrush)
        assert [item.id for item in cart.items] == ["item1", "item2", "item3", "rec1"]

    def test_merge_existing_keeps_position(self, sample_cart):
        shirt = Product(id="item2", name="Organic Cotton T-Shirt", price=Decimal("29.99"))
        cart = cart_ops.merge(sample_cart, shirt, variant="Medium, Green")

        assert [item.id for item in cart.items] == ["item1", "item2", "item3"]
        assert cart.items[1].quantity == 3

    def test_merge_does_not_mutate_input(self, sample_cart, headphones):
        before = sample_cart.model_dump()
        cart_ops.merge(sample_cart, headphones, variant="Black")
        assert sample_cart.model_dump() == before

    def test_zero_quantity_is_noop(self, sample_cart, toothbrush):
        assert cart_ops.merge(sample_cart, toothbrush, quantity=0) is sample_cart


class TestSetQuantity:
    def test_replaces_quantity(self, sample_cart):
        cart = cart_ops.set_quantity(sample_cart, "item3", 5)
        assert cart_ops.find(cart, "item3").quantity == 5

    def test_below_one_is_noop(self, sample_cart):
        """Quantity 0 leaves the cart unchanged rather than removing the line."""
        assert cart_ops.set_quantity(sample_cart, "item1", 0) is sample_cart
        assert cart_ops.set_quantity(sample_cart, "item1", -3) is sample_cart

    def test_unknown_id_is_noop(self, sample_cart):
        assert cart_ops.set_quantity(sample_cart, "missing", 2) is sample_cart

    def test_without_variant_updates_all_variants(self, headphones):
        cart = cart_ops.merge(Cart(), headphones, variant="Black")
        cart = cart_ops.merge(cart, headphones, variant="White")

        cart = cart_ops.set_quantity(cart, "item1", 4)
        assert [item.quantity for item in cart.items] == [4, 4]

    def test_with_variant_updates_single_line(self, headphones):
        cart = cart_ops.merge(Cart(), headphones, variant="Black")
        cart = cart_ops.merge(cart, headphones, variant="White")

        cart = cart_ops.set_quantity(cart, "item1", 4, variant="White")
        assert [item.quantity for item in cart.items] == [1, 4]


class TestRemove:
    def test_remove_line(self, sample_cart):
        cart = cart_ops.remove(sample_cart, "item2")
        assert [item.id for item in cart.items] == ["item1", "item3"]
        assert len(sample_cart.items) == 3

    def test_remove_unknown_is_noop(self, sample_cart):
        assert cart_ops.remove(sample_cart, "missing") is sample_cart

    def test_remove_by_id_drops_all_variants(self, headphones):
        cart = cart_ops.merge(Cart(), headphones, variant="Black")
        cart = cart_ops.merge(cart, headphones, variant="White")

        assert cart_ops.remove(cart, "item1").is_empty

    def test_remove_single_variant(self, headphones):
        cart = cart_ops.merge(Cart(), headphones, variant="Black")
        cart = cart_ops.merge(cart, headphones, variant="White")

        cart = cart_ops.remove(cart, "item1", variant="Black")
        assert [item.variant for item in cart.items] == ["White"]

    def test_add_then_remove_restores_subtotal(self, sample_cart, toothbrush):
        original = cart_ops.subtotal(sample_cart)
        cart = cart_ops.remove(cart_ops.merge(sample_cart, toothbrush), "rec1")
        assert cart_ops.subtotal(cart) == original


class TestDerived:
    def test_subtotal(self, sample_cart):
        assert cart_ops.subtotal(sample_cart) == Decimal("284.47")

    def test_subtotal_empty(self):
        assert cart_ops.subtotal(Cart()) == Decimal("0")

    def test_item_count(self, sample_cart):
        assert cart_ops.item_count(sample_cart) == 4

    def test_clear(self, sample_cart):
        assert cart_ops.clear(sample_cart).is_empty
        empty = Cart()
        assert cart_ops.clear(empty) is empty

    def test_find_uses_exact_key(self, sample_cart):
        assert cart_ops.find(sample_cart, "item1", "Black") is not None
        assert cart_ops.find(sample_cart, "item1") is None


class TestFromItems:
    def test_folds_duplicate_keys(self):
        items = [
            CartItem(id="a", name="A", unit_price=Decimal("1"), quantity=1),
            CartItem(id="b", name="B", unit_price=Decimal("2"), quantity=1),
            CartItem(id="a", name="A", unit_price=Decimal("1"), quantity=2),
        ]
        cart = cart_ops.from_items(items)

        assert [(item.id, item.quantity) for item in cart.items] == [("a", 3), ("b", 1)]


class TestValidation:
    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            CartItem(id="a", name="A", unit_price=Decimal("1"), quantity=0)

    def test_price_not_negative(self):
        with pytest.raises(ValidationError):
            CartItem(id="a", name="A", unit_price=Decimal("-1"), quantity=1)

    def test_items_are_frozen(self, sample_cart):
        with pytest.raises(ValidationError):
            sample_cart.items[0].quantity = 9
