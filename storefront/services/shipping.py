"""
Shipping tier resolution.

The tier the user selected and the tier that is billed are kept apart: a
tier whose minimum subtotal is not met falls back to the first tier of the
catalog, while the selection itself is left alone.
"""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..core.exceptions import ShippingCatalogError
from ..models.shipping import ShippingOption, ShippingSelection, ShippingTier
from .money import Number, format_money, format_price, to_money

logger = logging.getLogger(__name__)


def _find_tier(tiers: Sequence[ShippingTier], tier_id: str) -> Optional[ShippingTier]:
    return next((tier for tier in tiers if tier.id == tier_id), None)


def is_eligible(tier: ShippingTier, subtotal: Decimal) -> bool:
    """Whether the subtotal meets the tier's minimum, if it declares one"""
    return tier.minimum_subtotal is None or subtotal >= tier.minimum_subtotal


def resolve_shipping(
    subtotal: Number,
    tiers: Sequence[ShippingTier],
    selected_id: str,
) -> ShippingSelection:
    """
    Resolve the effective shipping tier for a subtotal.

    Args:
        subtotal: Cart subtotal
        tiers: Shipping catalog; the first tier is the default
        selected_id: Tier id chosen by the user

    Returns:
        ShippingSelection carrying the untouched selected_id and the tier
        to bill

    Raises:
        ShippingCatalogError: If the catalog is empty
    """
    if not tiers:
        raise ShippingCatalogError("Shipping tier catalog is empty")

    default_tier = tiers[0]
    amount = to_money(subtotal)

    tier = _find_tier(tiers, selected_id)
    if tier is None:
        logger.debug(f"Unknown shipping tier {selected_id!r}, using {default_tier.id!r}")
        tier = default_tier

    if not is_eligible(tier, amount):
        logger.debug(
            f"Subtotal {amount} below minimum {tier.minimum_subtotal} "
            f"for {tier.id!r}, billing {default_tier.id!r}"
        )
        tier = default_tier

    return ShippingSelection(selected_id=selected_id, effective=tier)


def effective_tier(
    subtotal: Number,
    tiers: Sequence[ShippingTier],
    selected_id: str,
) -> ShippingTier:
    """The tier to bill; see resolve_shipping"""
    return resolve_shipping(subtotal, tiers, selected_id).effective


def shipping_options(
    subtotal: Number,
    tiers: Sequence[ShippingTier],
    selected_id: str,
    currency_symbol: str = "$",
) -> list[ShippingOption]:
    """Picker rows in catalog order, with eligibility and qualification hints"""
    amount = to_money(subtotal)
    options = []

    for tier in tiers:
        eligible = is_eligible(tier, amount)
        hint = None
        if tier.minimum_subtotal is not None:
            hint = (
                "Qualified"
                if eligible
                else f"Spend {format_money(tier.minimum_subtotal, currency_symbol)} to qualify"
            )
        options.append(
            ShippingOption(
                tier=tier,
                eligible=eligible,
                selected=tier.id == selected_id,
                price_display=format_price(tier.price, currency_symbol),
                qualification_hint=hint,
            )
        )

    return options
