"""
Storefront Cart Application

Serves the cart pricing engine: line-item merging, shipping tier
selection, promo codes and order totals.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables before settings are read
load_dotenv()

from .core.config import settings  # noqa: E402
from .core.session import session_manager  # noqa: E402
from .routes import products_router, cart_router, checkout_router  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(
        f"Negative totals: {'clamped to zero' if settings.clamp_negative_total else 'allowed'}"
    )
    yield
    removed = session_manager.cleanup_old_sessions()
    logger.info(f"{settings.app_name} shutting down ({removed} expired session(s) removed)")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Cart pricing and composition engine for the storefront",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(checkout_router)


@app.get("/")
async def home():
    """API index"""
    return {
        "message": "Storefront Cart API",
        "docs": "/docs",
        "endpoints": {
            "cart": "/api/cart",
            "checkout": "/api/checkout",
            "products": "/api/products/recommended",
            "shipping": "/api/shipping",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront-cart"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
