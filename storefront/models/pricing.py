"""Derived pricing models"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from .shipping import ShippingSelection


class Totals(BaseModel):
    """Totals derived from a cart; recomputed on every change, never stored"""
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    shipping_cost: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int = 0


class PricedCart(BaseModel):
    """Totals together with the shipping selection they were billed against"""
    model_config = ConfigDict(frozen=True)

    totals: Totals
    shipping: ShippingSelection
