"""Promo code validation and promo entry state"""

import logging
from typing import Iterable, Optional

from ..models.promo import PromoCode, PromoRejection, PromoResult, PromoState
from .money import format_money

logger = logging.getLogger(__name__)

REJECTION_MESSAGES = {
    PromoRejection.EMPTY_INPUT: "Please enter a promo code",
    PromoRejection.NOT_FOUND: "Invalid promo code",
}


def normalize_code(raw: Optional[str]) -> str:
    """Trim and case-fold a code for comparison"""
    return (raw or "").strip().casefold()


def _rejected(reason: PromoRejection) -> PromoResult:
    return PromoResult(rejection=reason, message=REJECTION_MESSAGES[reason])


def validate_promo(raw: Optional[str], registry: Iterable[PromoCode]) -> PromoResult:
    """
    Match user-entered text against the promo registry.

    Matching ignores surrounding whitespace and case. Rejections are
    returned, not raised: an empty entry and an unknown code are both
    recoverable user errors.
    """
    code = normalize_code(raw)
    if not code:
        return _rejected(PromoRejection.EMPTY_INPUT)

    for promo in registry:
        if normalize_code(promo.code) == code:
            return PromoResult(promo=promo)

    logger.info(f"Rejected promo code {raw.strip()!r}")
    return _rejected(PromoRejection.NOT_FOUND)


def set_promo_input(state: PromoState, text: str) -> PromoState:
    """Update the text in the promo entry box"""
    return state.model_copy(update={"input_text": text})


def apply_promo(state: PromoState, registry: Iterable[PromoCode]) -> PromoState:
    """
    Validate the entered text and apply it.

    A valid code replaces any applied code and empties the entry box. An
    invalid one keeps the applied code and the entered text, and records
    the error message.
    """
    result = validate_promo(state.input_text, registry)
    if result.is_valid:
        logger.info(f"Applied promo code {result.promo.code}")
        return PromoState(input_text="", applied=result.promo, error=None)
    return state.model_copy(update={"error": result.message})


def remove_promo(state: PromoState) -> PromoState:
    """Drop the applied code and any pending error"""
    return state.model_copy(update={"applied": None, "error": None})


def describe_promo(promo: PromoCode, currency_symbol: str = "$") -> str:
    if promo.is_percentage:
        return f"{promo.discount_value.normalize():f}% off"
    return f"{format_money(promo.discount_value, currency_symbol)} off"
