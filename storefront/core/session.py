"""Cart sessions: per-visitor cart, shipping choice and promo state"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..database.promos import promo_db
from ..database.shipping import shipping_db
from ..database.snapshots import SnapshotStore, snapshot_store
from ..models.cart import Cart, CartItem, CartView
from ..models.checkout import CheckoutPayload
from ..models.pricing import PricedCart, Totals
from ..models.product import Product
from ..models.promo import PromoCode, PromoState
from ..models.shipping import ShippingTier
from ..services import cart as cart_ops
from ..services import promo as promo_ops
from ..services.money import ZERO, format_money
from ..services.pricing import build_checkout_payload, price_cart
from ..services.shipping import shipping_options
from .config import settings

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartSession:
    """
    Shopping session state.

    The cart is an immutable value that is replaced on every change. Totals
    are never stored; each read reprices the cart from scratch.
    """
    session_id: str
    created_at: datetime
    updated_at: datetime
    cart: Cart = field(default_factory=Cart)
    recommended: list[Product] = field(default_factory=list)
    selected_shipping_id: str = field(default_factory=lambda: settings.default_shipping_id)
    promo: PromoState = field(default_factory=PromoState)
    wishlist: list[str] = field(default_factory=list)
    is_loading: bool = True
    shipping_tiers: tuple[ShippingTier, ...] = field(default_factory=shipping_db.list_tiers)
    promo_codes: tuple[PromoCode, ...] = field(default_factory=promo_db.list_codes)
    clamp_total: bool = field(default_factory=lambda: settings.clamp_negative_total)

    def _replace_cart(self, cart: Cart) -> None:
        self.cart = cart
        self.updated_at = _now()

    # Input boundary

    def load(self, items: Iterable[CartItem], recommended: Iterable[Product] = ()) -> None:
        """Seed the session with fetched cart lines and recommendations"""
        self._replace_cart(cart_ops.from_items(items))
        self.recommended = list(recommended)
        self.is_loading = False

    def load_failed(self) -> None:
        """Fetch failed: show an empty cart instead of propagating the error"""
        logger.warning(f"Cart fetch failed for session {self.session_id}, showing empty cart")
        self._replace_cart(Cart())
        self.is_loading = False

    # Cart mutations

    def add_product(self, product: Product, quantity: int = 1, variant: Optional[str] = None) -> None:
        self._replace_cart(cart_ops.merge(self.cart, product, quantity, variant))

    def update_quantity(self, item_id: str, quantity: int, variant=cart_ops.ANY_VARIANT) -> None:
        self._replace_cart(cart_ops.set_quantity(self.cart, item_id, quantity, variant))

    def remove_item(self, item_id: str, variant=cart_ops.ANY_VARIANT) -> None:
        self._replace_cart(cart_ops.remove(self.cart, item_id, variant))

    def restore(self, cart: Cart) -> None:
        self._replace_cart(cart)

    # Shipping and promo

    def select_shipping(self, tier_id: str) -> None:
        """Record the user's choice; eligibility is applied at pricing time"""
        self.selected_shipping_id = tier_id
        self.updated_at = _now()

    def enter_promo(self, text: str) -> None:
        self.promo = promo_ops.set_promo_input(self.promo, text)

    def apply_promo(self, text: Optional[str] = None) -> PromoState:
        """Apply the entered promo text (or ``text``, entered first)"""
        if text is not None:
            self.enter_promo(text)
        self.promo = promo_ops.apply_promo(self.promo, self.promo_codes)
        self.updated_at = _now()
        return self.promo

    def remove_promo(self) -> None:
        self.promo = promo_ops.remove_promo(self.promo)
        self.updated_at = _now()

    def toggle_wishlist(self, product_id: str) -> bool:
        """Toggle a product on the wishlist; returns whether it is now listed"""
        self.updated_at = _now()
        if product_id in self.wishlist:
            self.wishlist = [pid for pid in self.wishlist if pid != product_id]
            return False
        self.wishlist = [*self.wishlist, product_id]
        return True

    # Derived values

    def price(self) -> PricedCart:
        return price_cart(
            self.cart,
            self.shipping_tiers,
            self.selected_shipping_id,
            self.promo.applied,
            clamp=self.clamp_total,
        )

    @property
    def totals(self) -> Totals:
        return self.price().totals

    def checkout_payload(self) -> CheckoutPayload:
        priced = self.price()
        return build_checkout_payload(self.cart, priced.shipping, priced.totals)

    def to_view(self, message: Optional[str] = None) -> CartView:
        """Everything the cart page displays, from a single pricing pass"""
        symbol = settings.currency_symbol
        priced = self.price()
        totals = priced.totals
        applied = self.promo.applied

        return CartView(
            session_id=self.session_id,
            items=list(self.cart.items),
            is_empty=self.cart.is_empty,
            is_loading=self.is_loading,
            totals=totals,
            shipping=priced.shipping,
            shipping_options=shipping_options(
                totals.subtotal, self.shipping_tiers, self.selected_shipping_id, symbol
            ),
            promo=self.promo,
            promo_description=promo_ops.describe_promo(applied, symbol) if applied else None,
            wishlist=list(self.wishlist),
            recommended=list(self.recommended),
            subtotal_display=format_money(totals.subtotal, symbol),
            total_display=format_money(totals.total, symbol),
            savings_display=(
                format_money(totals.discount_amount, symbol)
                if totals.discount_amount > ZERO
                else None
            ),
            message=message,
        )


class SessionManager:
    """Manages cart sessions"""

    def __init__(self, snapshots: Optional[SnapshotStore] = None):
        self.sessions: dict[str, CartSession] = {}
        self.snapshots = snapshots if snapshots is not None else snapshot_store

    def create_session(self) -> CartSession:
        """
        Create a new session with an empty cart.

        Expired sessions are swept first. The new session stays in the
        loading state until ``load`` or ``load_failed`` is called.
        """
        self.cleanup_old_sessions()

        now = _now()
        session = CartSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
        )
        self.sessions[session.session_id] = session
        logger.info(f"Created cart session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[CartSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def get_or_create_session(self, session_id: Optional[str] = None) -> CartSession:
        """Get existing session or create new one"""
        if session_id and session_id in self.sessions:
            return self.sessions[session_id]
        return self.create_session()

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        if session_id in self.sessions:
            del self.sessions[session_id]
            self.snapshots.purge(session_id)
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: Optional[int] = None) -> int:
        """Remove sessions idle for longer than max_age_hours, with their snapshots"""
        if max_age_hours is None:
            max_age_hours = settings.session_max_age_hours

        now = _now()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]

        for sid in old_sessions:
            del self.sessions[sid]
            self.snapshots.purge(sid)

        if old_sessions:
            logger.info(f"Cleaned up {len(old_sessions)} expired cart session(s)")
        return len(old_sessions)


# Global session manager
session_manager = SessionManager()
