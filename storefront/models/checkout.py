"""Checkout models for the storefront"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from .cart import CartItem
from .shipping import ShippingTier


class CheckoutPayload(BaseModel):
    """Hand-off to the checkout collaborator; payment is not validated here"""
    model_config = ConfigDict(frozen=True)

    items: list[CartItem]
    shipping: ShippingTier
    discount: Decimal
    total: Decimal
