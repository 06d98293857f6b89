"""Storefront exceptions"""


class StorefrontError(Exception):
    """Base class for storefront errors"""


class ShippingCatalogError(StorefrontError):
    """The shipping tier catalog cannot be used for pricing"""
