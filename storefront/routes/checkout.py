"""Checkout API routes"""

import logging

from fastapi import APIRouter, HTTPException

from ..core.session import session_manager
from ..models.checkout import CheckoutPayload
from ..services.money import format_money

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("/{session_id}", response_model=CheckoutPayload)
async def checkout(session_id: str):
    """
    Hand the priced cart to checkout.

    The payload is built from the same pricing pass the cart page shows.
    Payment details are collected and validated downstream, not here.
    """
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart session not found")

    if session.cart.is_empty:
        raise HTTPException(status_code=400, detail="Cart is empty")

    payload = session.checkout_payload()

    logger.info(
        f"Checkout for session {session_id}: {len(payload.items)} line(s), "
        f"shipping={payload.shipping.id}, discount={payload.discount}, "
        f"total={format_money(payload.total)}"
    )

    return payload
