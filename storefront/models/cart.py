"""Cart models for the storefront"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .pricing import Totals
from .product import Product
from .promo import PromoState
from .shipping import ShippingOption, ShippingSelection


class CartItem(BaseModel):
    """Line item in a shopping cart"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    unit_price: Decimal = Field(ge=0)
    quantity: int = Field(ge=1)
    image_ref: str = ""
    variant: Optional[str] = None

    @property
    def merge_key(self) -> tuple[str, Optional[str]]:
        """Identity used to decide whether an add updates this line"""
        return (self.id, self.variant)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """Immutable, ordered collection of line items"""
    model_config = ConfigDict(frozen=True)

    items: tuple[CartItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items


class AddToCartRequest(BaseModel):
    """Request to add a catalog product to the cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)
    variant: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity (values below 1 are ignored)"""
    quantity: int


class CartView(BaseModel):
    """Everything the cart page shows, derived from one session"""
    session_id: str
    items: list[CartItem]
    is_empty: bool
    is_loading: bool
    totals: Totals
    shipping: ShippingSelection
    shipping_options: list[ShippingOption]
    promo: PromoState
    promo_description: Optional[str] = None
    wishlist: list[str] = []
    recommended: list[Product] = []
    subtotal_display: str
    total_display: str
    savings_display: Optional[str] = None
    message: Optional[str] = None
