"""Shipping tier catalog"""

from decimal import Decimal
from typing import Optional

from ..models.shipping import ShippingTier

# Catalog order matters: the first tier is the default and the fallback
SHIPPING_TIERS: tuple[ShippingTier, ...] = (
    ShippingTier(
        id="standard",
        name="Standard Shipping",
        price=Decimal("4.99"),
        eta_days_range="3-5",
    ),
    ShippingTier(
        id="express",
        name="Express Shipping",
        price=Decimal("12.99"),
        eta_days_range="1-2",
    ),
    ShippingTier(
        id="free",
        name="Free Shipping",
        price=Decimal("0"),
        eta_days_range="5-7",
        minimum_subtotal=Decimal("50"),
    ),
)


class ShippingDatabase:
    """In-memory shipping tier catalog"""

    def __init__(self, tiers: tuple[ShippingTier, ...] = SHIPPING_TIERS):
        self.tiers = tuple(tiers)

    def get_tier(self, tier_id: str) -> Optional[ShippingTier]:
        """Get a tier by ID"""
        return next((tier for tier in self.tiers if tier.id == tier_id), None)

    def list_tiers(self) -> tuple[ShippingTier, ...]:
        """All tiers in catalog order"""
        return self.tiers


# Singleton instance
shipping_db = ShippingDatabase()
