"""Cart storage for the storefront"""

import logging

from pydantic import ValidationError

from ..models.cart import Cart, CartLine, StoredCart
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


class CartStore:
    """Persists the single active cart snapshot under a fixed key"""

    def __init__(self, storage: KeyValueStorage, key: str = "dots_cart"):
        self.storage = storage
        self.key = key

    def load(self) -> list[CartLine]:
        """
        Stored cart lines.

        Missing, unreadable or malformed data yields an empty list. Stored
        totals are never read back; callers recompute them from the lines.
        """
        try:
            raw = self.storage.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading cart: {e}")
            return []

        if not raw:
            return []

        try:
            lines = StoredCart.model_validate_json(raw).lines
        except ValidationError as e:
            logger.warning(f"Discarding malformed cart under {self.key!r}: {e.error_count()} errors")
            return []

        return self._merge_duplicates(lines)

    @staticmethod
    def _merge_duplicates(lines: list[CartLine]) -> list[CartLine]:
        """Collapse lines sharing an identity key, keeping the first one's position"""
        merged: dict[tuple[str, str], CartLine] = {}
        for line in lines:
            existing = merged.get(line.identity_key)
            if existing is not None:
                existing.quantity += line.quantity
            else:
                merged[line.identity_key] = line

        if len(merged) < len(lines):
            logger.warning(f"Merged {len(lines) - len(merged)} duplicate cart lines")
        return list(merged.values())

    def save(self, cart: Cart) -> bool:
        """
        Write the cart snapshot.

        Returns False when storage rejects the write; the caller keeps its
        in-memory cart either way.
        """
        try:
            payload = cart.model_dump_json()
            self.storage.set_item(self.key, payload)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error saving cart: {e}")
            return False
        return True

    def clear(self) -> bool:
        return self.save(Cart())
