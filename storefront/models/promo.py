"""Promo code models"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class PromoRejection(str, Enum):
    """Why a promo code was not accepted"""
    EMPTY_INPUT = "empty_input"
    NOT_FOUND = "not_found"


class PromoCode(BaseModel):
    """Discount descriptor from the promo registry"""
    model_config = ConfigDict(frozen=True)

    code: str
    discount_value: Decimal = Field(ge=0)
    is_percentage: bool


class PromoResult(BaseModel):
    """Outcome of validating user-entered promo text"""
    model_config = ConfigDict(frozen=True)

    promo: Optional[PromoCode] = None
    rejection: Optional[PromoRejection] = None
    message: Optional[str] = None

    @computed_field
    @property
    def is_valid(self) -> bool:
        return self.promo is not None


class PromoState(BaseModel):
    """State of the promo entry box and the currently applied code"""
    model_config = ConfigDict(frozen=True)

    input_text: str = ""
    applied: Optional[PromoCode] = None
    error: Optional[str] = None


class ApplyPromoRequest(BaseModel):
    """Request to apply a promo code"""
    code: str = ""
