"""
Cart collection operations.

Every operation takes a Cart and returns a Cart. Nothing is mutated in
place: callers replace the cart they hold with the returned value. When an
operation changes nothing, the very same Cart is returned.
"""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from ..models.cart import Cart, CartItem
from ..models.product import Product
from .money import add_money

logger = logging.getLogger(__name__)


class _AnyVariant:
    """Marker for operations keyed by product id alone"""

    def __repr__(self) -> str:
        return "ANY_VARIANT"


ANY_VARIANT = _AnyVariant()


def _matches(item: CartItem, item_id: str, variant) -> bool:
    if item.id != item_id:
        return False
    return variant is ANY_VARIANT or item.variant == variant


def from_items(items: Iterable[CartItem]) -> Cart:
    """
    Build a cart from already-fetched line items.

    Duplicate (id, variant) entries are folded into the first occurrence so
    the one-line-per-key rule holds for externally supplied data too.
    """
    merged: list[CartItem] = []
    positions: dict[tuple[str, Optional[str]], int] = {}

    for item in items:
        index = positions.get(item.merge_key)
        if index is None:
            positions[item.merge_key] = len(merged)
            merged.append(item)
        else:
            existing = merged[index]
            merged[index] = existing.model_copy(
                update={"quantity": existing.quantity + item.quantity}
            )

    return Cart(items=tuple(merged))


def merge(
    cart: Cart,
    product: Product,
    quantity: int = 1,
    variant: Optional[str] = None,
) -> Cart:
    """
    Add a product to the cart.

    An existing line with the same (product id, variant) has its quantity
    increased; otherwise a new line is appended at the end. A quantity
    below 1 leaves the cart unchanged.
    """
    if quantity < 1:
        return cart

    key = (product.id, variant)
    items = list(cart.items)

    for index, item in enumerate(items):
        if item.merge_key == key:
            items[index] = item.model_copy(update={"quantity": item.quantity + quantity})
            break
    else:
        items.append(
            CartItem(
                id=product.id,
                name=product.name,
                unit_price=product.price,
                quantity=quantity,
                image_ref=product.image_ref,
                variant=variant,
            )
        )

    return Cart(items=tuple(items))


def set_quantity(
    cart: Cart,
    item_id: str,
    new_quantity: int,
    variant=ANY_VARIANT,
) -> Cart:
    """
    Replace the quantity of the lines matching ``item_id``.

    Quantities below 1 are ignored (the line is kept, not removed). Without
    ``variant`` every variant of the id is updated; pass ``variant`` (None
    included) to target a single line.
    """
    if new_quantity < 1:
        return cart

    if not any(_matches(item, item_id, variant) for item in cart.items):
        return cart

    return Cart(
        items=tuple(
            item.model_copy(update={"quantity": new_quantity})
            if _matches(item, item_id, variant)
            else item
            for item in cart.items
        )
    )


def remove(cart: Cart, item_id: str, variant=ANY_VARIANT) -> Cart:
    """
    Remove the lines matching ``item_id``.

    Without ``variant`` all variants sharing the id are removed together.
    Unknown ids are a no-op.
    """
    remaining = tuple(item for item in cart.items if not _matches(item, item_id, variant))
    if len(remaining) == len(cart.items):
        return cart
    return Cart(items=remaining)


def clear(cart: Cart) -> Cart:
    if cart.is_empty:
        return cart
    return Cart()


def find(cart: Cart, item_id: str, variant: Optional[str] = None) -> Optional[CartItem]:
    """Line with the exact (id, variant) key, if present"""
    return next(
        (item for item in cart.items if item.merge_key == (item_id, variant)),
        None,
    )


def subtotal(cart: Cart) -> Decimal:
    """Sum of unit price times quantity over all lines"""
    return add_money(*(item.line_total for item in cart.items))


def item_count(cart: Cart) -> int:
    """Total number of units in the cart"""
    return sum(item.quantity for item in cart.items)
