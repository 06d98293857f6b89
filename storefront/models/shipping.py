"""Shipping tier models"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ShippingTier(BaseModel):
    """Shipping option offered at checkout"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: Decimal = Field(ge=0)
    eta_days_range: str
    # Eligible only when the cart subtotal reaches this amount
    minimum_subtotal: Optional[Decimal] = Field(default=None, ge=0)


class ShippingSelection(BaseModel):
    """
    The shipping tier the user picked next to the tier actually billed.

    ``selected_id`` is never rewritten by eligibility rules, so the UI keeps
    showing the user's choice while ``effective`` reflects the fallback.
    """
    model_config = ConfigDict(frozen=True)

    selected_id: str
    effective: ShippingTier

    @computed_field
    @property
    def is_overridden(self) -> bool:
        return self.effective.id != self.selected_id


class ShippingOption(BaseModel):
    """Display row for one tier in the shipping picker"""
    model_config = ConfigDict(frozen=True)

    tier: ShippingTier
    eligible: bool
    selected: bool
    price_display: str
    qualification_hint: Optional[str] = None


class SelectShippingRequest(BaseModel):
    """Request to change the selected shipping tier"""
    shipping_id: str
