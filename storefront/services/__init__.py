# Cart pricing and composition services

from . import cart
from .money import to_money, add_money, percent_of, round_money, format_money, format_price
from .shipping import resolve_shipping, effective_tier, shipping_options
from .promo import validate_promo, apply_promo, remove_promo, set_promo_input, describe_promo
from .pricing import compute_totals, price_cart, build_checkout_payload

__all__ = [
    "cart",
    "to_money",
    "add_money",
    "percent_of",
    "round_money",
    "format_money",
    "format_price",
    "resolve_shipping",
    "effective_tier",
    "shipping_options",
    "validate_promo",
    "apply_promo",
    "remove_promo",
    "set_promo_input",
    "describe_promo",
    "compute_totals",
    "price_cart",
    "build_checkout_payload",
]
