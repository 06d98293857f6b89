"""Product models for the storefront catalog"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product in the catalog (read-only input to the cart)"""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: str
    price: Decimal = Field(ge=0)
    image_ref: str = ""
    variants: Optional[frozenset[str]] = None
    description: Optional[str] = None


class RecommendedProductsResponse(BaseModel):
    """Recommended products shown beside the cart"""
    products: list[Product]
    total: int
