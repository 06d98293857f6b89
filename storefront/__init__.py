"""Storefront cart pricing and composition engine"""

__version__ = "1.0.0"
