# Storefront Models

from .product import Product, RecommendedProductsResponse
from .shipping import ShippingTier, ShippingSelection, ShippingOption, SelectShippingRequest
from .promo import PromoCode, PromoRejection, PromoResult, PromoState, ApplyPromoRequest
from .pricing import Totals, PricedCart
from .cart import Cart, CartItem, AddToCartRequest, UpdateCartItemRequest, CartView
from .checkout import CheckoutPayload

__all__ = [
    "Product",
    "RecommendedProductsResponse",
    "ShippingTier",
    "ShippingSelection",
    "ShippingOption",
    "SelectShippingRequest",
    "PromoCode",
    "PromoRejection",
    "PromoResult",
    "PromoState",
    "ApplyPromoRequest",
    "Totals",
    "PricedCart",
    "Cart",
    "CartItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartView",
    "CheckoutPayload",
]
