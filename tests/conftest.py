"""Shared fixtures for storefront tests"""

from decimal import Decimal

import pytest

from storefront.models import CartItem, Product, PromoCode, ShippingTier
from storefront.services import cart as cart_ops


@pytest.fixture
def tiers():
    return (
        ShippingTier(id="standard", name="Standard Shipping", price=Decimal("4.99"), eta_days_range="3-5"),
        ShippingTier(id="express", name="Express Shipping", price=Decimal("12.99"), eta_days_range="1-2"),
        ShippingTier(
            id="free",
            name="Free Shipping",
            price=Decimal("0"),
            eta_days_range="5-7",
            minimum_subtotal=Decimal("50"),
        ),
    )


@pytest.fixture
def registry():
    return (
        PromoCode(code="GREEN10", discount_value=Decimal("10"), is_percentage=True),
        PromoCode(code="SAVE20", discount_value=Decimal("20"), is_percentage=True),
        PromoCode(code="FLAT15", discount_value=Decimal("15"), is_percentage=False),
    )


@pytest.fixture
def headphones():
    return Product(
        id="item1",
        name="Wireless Headphones",
        price=Decimal("199.99"),
        variants=frozenset({"Black", "White"}),
    )


@pytest.fixture
def toothbrush():
    return Product(id="rec1", name="Bamboo Toothbrush", price=Decimal("12.99"))


@pytest.fixture
def sample_items():
    return [
        CartItem(id="item1", name="Wireless Headphones", unit_price=Decimal("199.99"), quantity=1, variant="Black"),
        CartItem(id="item2", name="Organic Cotton T-Shirt", unit_price=Decimal("29.99"), quantity=2, variant="Medium, Green"),
        CartItem(id="item3", name="Eco-Friendly Water Bottle", unit_price=Decimal("24.50"), quantity=1),
    ]


@pytest.fixture
def sample_cart(sample_items):
    return cart_ops.from_items(sample_items)
