"""Save-for-later cart snapshots"""

import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..core.config import settings
from ..models.cart import Cart, CartItem
from ..services import cart as cart_ops

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(list[CartItem])


class SnapshotStore:
    """
    In-memory key/value store of serialized carts.

    Each entry is a JSON array of cart items. Entries saved with a ``scope``
    (the owning session id) are stored as ``"<scope>:<key>"`` and are only
    visible to that scope. Snapshots are best-effort: they live only as long
    as the process.
    """

    def __init__(self):
        self.entries: dict[str, str] = {}

    @staticmethod
    def entry_key(key: Optional[str] = None, scope: Optional[str] = None) -> str:
        key = key or settings.saved_cart_key
        return f"{scope}:{key}" if scope else key

    def save(self, cart: Cart, key: Optional[str] = None, scope: Optional[str] = None) -> str:
        """Serialize the cart under ``key`` and return the stored JSON"""
        entry = self.entry_key(key, scope)
        payload = _items_adapter.dump_json(list(cart.items)).decode("utf-8")
        self.entries[entry] = payload
        logger.info(f"Saved cart snapshot {entry!r} with {len(cart.items)} line(s)")
        return payload

    def load(self, key: Optional[str] = None, scope: Optional[str] = None) -> Optional[Cart]:
        """Restore a snapshot, or None when it is missing or unreadable"""
        entry = self.entry_key(key, scope)
        payload = self.entries.get(entry)
        if payload is None:
            return None

        try:
            items = _items_adapter.validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cart snapshot {entry!r}: {e}")
            return None

        return cart_ops.from_items(items)

    def delete(self, key: Optional[str] = None, scope: Optional[str] = None) -> bool:
        """Delete a snapshot"""
        entry = self.entry_key(key, scope)
        if entry in self.entries:
            del self.entries[entry]
            return True
        return False

    def purge(self, scope: str) -> int:
        """Delete every snapshot saved under ``scope``"""
        prefix = f"{scope}:"
        owned = [entry for entry in self.entries if entry.startswith(prefix)]
        for entry in owned:
            del self.entries[entry]
        return len(owned)


# Singleton instance
snapshot_store = SnapshotStore()
