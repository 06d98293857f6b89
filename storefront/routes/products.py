"""Product and shipping catalog routes"""

from fastapi import APIRouter, HTTPException, Query

from ..database.products import product_db
from ..database.shipping import shipping_db
from ..models.product import Product, RecommendedProductsResponse
from ..models.shipping import ShippingTier

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/products/recommended", response_model=RecommendedProductsResponse)
async def recommended_products(limit: int = Query(3, ge=1, le=20)):
    """Products suggested alongside the cart"""
    products = product_db.get_recommended(limit=limit)
    return RecommendedProductsResponse(products=products, total=len(products))


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/shipping", response_model=list[ShippingTier])
async def list_shipping_tiers():
    """Shipping tiers in catalog order"""
    return list(shipping_db.list_tiers())
