# Database modules

from .products import product_db, ProductDatabase
from .shipping import shipping_db, ShippingDatabase
from .promos import promo_db, PromoDatabase
from .snapshots import snapshot_store, SnapshotStore

__all__ = [
    "product_db",
    "ProductDatabase",
    "shipping_db",
    "ShippingDatabase",
    "promo_db",
    "PromoDatabase",
    "snapshot_store",
    "SnapshotStore",
]
