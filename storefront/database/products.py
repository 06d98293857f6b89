"""Mock product database"""

from decimal import Decimal
from typing import Optional

from ..models.product import Product

PLACEHOLDER_IMAGE = (
    "https://images.pexels.com/photos/4050287/pexels-photo-4050287.jpeg"
    "?auto=compress&cs=tinysrgb&w=600"
)

# Mock product catalog
PRODUCTS: dict[str, Product] = {
    "item1": Product(
        id="item1",
        name="Wireless Headphones",
        price=Decimal("199.99"),
        image_ref=PLACEHOLDER_IMAGE,
        variants=frozenset({"Black", "White"}),
    ),
    "item2": Product(
        id="item2",
        name="Organic Cotton T-Shirt",
        price=Decimal("29.99"),
        image_ref=PLACEHOLDER_IMAGE,
        variants=frozenset({"Small, Green", "Medium, Green", "Large, Green"}),
    ),
    "item3": Product(
        id="item3",
        name="Eco-Friendly Water Bottle",
        price=Decimal("24.50"),
        image_ref=PLACEHOLDER_IMAGE,
    ),
    "rec1": Product(
        id="rec1",
        name="Bamboo Toothbrush",
        price=Decimal("12.99"),
        image_ref=PLACEHOLDER_IMAGE,
    ),
    "rec2": Product(
        id="rec2",
        name="Reusable Shopping Bag",
        price=Decimal("9.99"),
        image_ref=PLACEHOLDER_IMAGE,
    ),
    "rec3": Product(
        id="rec3",
        name="Organic Lip Balm",
        price=Decimal("4.99"),
        image_ref=PLACEHOLDER_IMAGE,
    ),
}

RECOMMENDED_IDS = ("rec1", "rec2", "rec3")


class ProductDatabase:
    """In-memory product catalog"""

    def __init__(self):
        self.products = PRODUCTS.copy()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_recommended(self, limit: int = 3) -> list[Product]:
        """Products suggested alongside the cart"""
        recommended = [self.products[pid] for pid in RECOMMENDED_IDS if pid in self.products]
        return recommended[:limit]


# Singleton instance
product_db = ProductDatabase()
