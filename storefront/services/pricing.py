"""
Pricing engine.

compute_totals is the single source of every monetary figure shown for a
cart and of the checkout payload. It is a pure function: the same inputs
always give the same Totals, and nothing is cached between calls.
"""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..models.cart import Cart
from ..models.checkout import CheckoutPayload
from ..models.pricing import PricedCart, Totals
from ..models.promo import PromoCode
from ..models.shipping import ShippingSelection, ShippingTier
from . import cart as cart_ops
from .money import ZERO, percent_of
from .shipping import resolve_shipping

logger = logging.getLogger(__name__)


def discount_for(promo: Optional[PromoCode], subtotal: Decimal) -> Decimal:
    """Discount a promo grants on a subtotal; zero without a promo"""
    if promo is None:
        return ZERO
    if promo.is_percentage:
        return percent_of(subtotal, promo.discount_value)
    return promo.discount_value


def compute_totals(
    cart: Cart,
    effective_tier: ShippingTier,
    applied_promo: Optional[PromoCode] = None,
    clamp: bool = True,
) -> Totals:
    """
    Compute cart totals.

    Args:
        cart: Current cart
        effective_tier: Shipping tier to bill (already resolved)
        applied_promo: Active promo code, if any
        clamp: Floor the total at zero when the discount exceeds it

    Returns:
        Unrounded Totals
    """
    subtotal = cart_ops.subtotal(cart)
    shipping_cost = effective_tier.price
    discount_amount = discount_for(applied_promo, subtotal)
    total = subtotal + shipping_cost - discount_amount

    if clamp and total < ZERO:
        logger.debug(f"Discount {discount_amount} exceeds order value, total floored at zero")
        total = ZERO

    return Totals(
        subtotal=subtotal,
        shipping_cost=shipping_cost,
        discount_amount=discount_amount,
        total=total,
        item_count=cart_ops.item_count(cart),
    )


def price_cart(
    cart: Cart,
    tiers: Sequence[ShippingTier],
    selected_shipping_id: str,
    applied_promo: Optional[PromoCode] = None,
    clamp: bool = True,
) -> PricedCart:
    """Resolve shipping against the current subtotal, then compute totals"""
    selection = resolve_shipping(cart_ops.subtotal(cart), tiers, selected_shipping_id)
    totals = compute_totals(cart, selection.effective, applied_promo, clamp=clamp)
    return PricedCart(totals=totals, shipping=selection)


def build_checkout_payload(
    cart: Cart,
    selection: ShippingSelection,
    totals: Totals,
) -> CheckoutPayload:
    """Payload handed to the checkout collaborator as-is"""
    return CheckoutPayload(
        items=list(cart.items),
        shipping=selection.effective,
        discount=totals.discount_amount,
        total=totals.total,
    )
