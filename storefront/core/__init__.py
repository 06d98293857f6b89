# Core modules

from .config import settings, get_settings, Settings
from .exceptions import StorefrontError, ShippingCatalogError

__all__ = ["settings", "get_settings", "Settings", "StorefrontError", "ShippingCatalogError"]
