"""Cart API routes"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..core.session import CartSession, session_manager
from ..database.products import product_db
from ..database.snapshots import snapshot_store
from ..models.cart import AddToCartRequest, CartView, UpdateCartItemRequest
from ..models.promo import ApplyPromoRequest
from ..models.shipping import SelectShippingRequest
from ..services.cart import ANY_VARIANT

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def get_session_or_404(session_id: str) -> CartSession:
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart session not found")
    return session


def target_variant(variant: Optional[str], exact: bool):
    """Without a variant, match every line of the id unless ``exact`` asks for the plain line"""
    if variant is None and not exact:
        return ANY_VARIANT
    return variant


@router.post("", response_model=CartView)
async def create_cart():
    """Start a cart session with an empty cart"""
    session = session_manager.create_session()
    session.load((), product_db.get_recommended())
    return session.to_view(message="Cart created")


@router.get("/{session_id}", response_model=CartView)
async def get_cart(session_id: str):
    """Get the cart with freshly computed totals"""
    return get_session_or_404(session_id).to_view()


@router.post("/{session_id}/items", response_model=CartView)
async def add_to_cart(session_id: str, request: AddToCartRequest):
    """Add a product to the cart, merging into a matching line"""
    session = get_session_or_404(session_id)

    product = product_db.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if request.variant is not None and request.variant not in (product.variants or ()):
        raise HTTPException(
            status_code=400,
            detail=f"Variant {request.variant!r} is not available for {product.name}",
        )

    session.add_product(product, request.quantity, request.variant)
    return session.to_view(message=f"Added {request.quantity}x {product.name} to cart")


@router.put("/{session_id}/items/{item_id}", response_model=CartView)
async def update_cart_item(
    session_id: str,
    item_id: str,
    request: UpdateCartItemRequest,
    variant: Optional[str] = Query(None, description="Only update this variant"),
    exact: bool = Query(False, description="Without a variant, update only the plain line"),
):
    """Update item quantity; quantities below 1 leave the cart unchanged"""
    session = get_session_or_404(session_id)
    session.update_quantity(item_id, request.quantity, target_variant(variant, exact))
    return session.to_view(message="Cart updated")


@router.delete("/{session_id}/items/{item_id}", response_model=CartView)
async def remove_from_cart(
    session_id: str,
    item_id: str,
    variant: Optional[str] = Query(None, description="Only remove this variant"),
    exact: bool = Query(False, description="Without a variant, remove only the plain line"),
):
    """Remove an item (all of its lines unless a variant or ``exact`` is given)"""
    session = get_session_or_404(session_id)
    session.remove_item(item_id, target_variant(variant, exact))
    return session.to_view(message="Item removed")


@router.put("/{session_id}/shipping", response_model=CartView)
async def select_shipping(session_id: str, request: SelectShippingRequest):
    """Select a shipping tier; an ineligible choice is billed at the default tier"""
    session = get_session_or_404(session_id)

    if all(tier.id != request.shipping_id for tier in session.shipping_tiers):
        raise HTTPException(status_code=404, detail="Shipping option not found")

    session.select_shipping(request.shipping_id)
    return session.to_view()


@router.post("/{session_id}/promo", response_model=CartView)
async def apply_promo(session_id: str, request: ApplyPromoRequest):
    """
    Apply a promo code.

    Invalid or empty codes are not HTTP errors: the message is returned
    in ``promo.error`` for inline display.
    """
    session = get_session_or_404(session_id)
    state = session.apply_promo(request.code)
    return session.to_view(message=state.error)


@router.delete("/{session_id}/promo", response_model=CartView)
async def remove_promo(session_id: str):
    """Remove the applied promo code"""
    session = get_session_or_404(session_id)
    session.remove_promo()
    return session.to_view()


@router.post("/{session_id}/wishlist/{product_id}", response_model=CartView)
async def toggle_wishlist(session_id: str, product_id: str):
    """Add a product to the wishlist, or remove it if already there"""
    session = get_session_or_404(session_id)
    listed = session.toggle_wishlist(product_id)
    return session.to_view(message="Saved to wishlist" if listed else "Removed from wishlist")


@router.post("/{session_id}/save", response_model=CartView)
async def save_cart_for_later(
    session_id: str,
    key: Optional[str] = Query(None, description="Snapshot key"),
):
    """Snapshot the cart so this session can restore it later"""
    session = get_session_or_404(session_id)
    snapshot_store.save(session.cart, key, scope=session_id)
    return session.to_view(message="Cart saved for later!")


@router.post("/{session_id}/restore", response_model=CartView)
async def restore_saved_cart(
    session_id: str,
    key: Optional[str] = Query(None, description="Snapshot key"),
):
    """Replace the cart with one of this session's saved snapshots"""
    session = get_session_or_404(session_id)

    cart = snapshot_store.load(key, scope=session_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="No saved cart")

    session.restore(cart)
    return session.to_view(message="Saved cart restored")
