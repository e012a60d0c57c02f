"""
Cart Service

Sole mutator of the active cart. Every operation loads the stored lines,
applies the change, recomputes totals and persists the result.
"""

import logging
from typing import Callable, Optional

from ..core.config import Settings
from ..core.exceptions import CartOperationError, InvalidQuantityError
from ..core.notifications import NotificationCenter
from ..database.carts import CartStore
from ..models.cart import Cart, CartItem, CartLine, Customization, identity_key
from ..models.checkout import ShippingAddress
from .totals import build_cart

logger = logging.getLogger(__name__)


class CartService:
    """Cart mutations with identity rules and recomputed totals"""

    def __init__(
        self,
        store: CartStore,
        settings: Settings,
        notifications: Optional[NotificationCenter] = None,
    ):
        self.store = store
        self.settings = settings
        self.notifications = notifications or NotificationCenter()

    def get_cart(self) -> Cart:
        """Current cart with freshly derived totals"""
        return build_cart(self.store.load(), self.settings)

    def quote(self, address: Optional[ShippingAddress] = None) -> Cart:
        """Current cart priced for a destination. Nothing is persisted."""
        return build_cart(self.store.load(), self.settings, address)

    def add_item(self, item: CartItem, quantity: int = 1) -> Cart:
        """Add an item, merging into an existing line with the same identity"""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(f"Quantity must be a positive integer, got {quantity!r}")

        def mutate(lines: list[CartLine]) -> list[CartLine]:
            key = identity_key(item.product_id, item.customization)
            for line in lines:
                if line.identity_key == key:
                    line.quantity += quantity
                    break
            else:
                lines.append(CartLine(**item.model_dump(exclude={"quantity"}), quantity=quantity))
            return lines

        cart = self._apply(mutate, "Failed to add item to cart")
        self.notifications.product_added_to_cart(item.product_name or item.product_id)
        return cart

    def update_item(
        self,
        product_id: str,
        quantity: int,
        customization: Optional[Customization] = None,
    ) -> Cart:
        """Set a line's quantity. Zero or less removes the line."""
        key = identity_key(product_id, customization)

        def mutate(lines: list[CartLine]) -> list[CartLine]:
            if quantity <= 0:
                return [line for line in lines if line.identity_key != key]
            for line in lines:
                if line.identity_key == key:
                    line.quantity = quantity
            return lines

        return self._apply(mutate, "Failed to update cart item")

    def remove_item(
        self,
        product_id: str,
        customization: Optional[Customization] = None,
    ) -> Cart:
        """Remove the line matching the identity key, if any"""
        key = identity_key(product_id, customization)
        removed: list[CartLine] = []

        def mutate(lines: list[CartLine]) -> list[CartLine]:
            removed.extend(line for line in lines if line.identity_key == key)
            return [line for line in lines if line.identity_key != key]

        cart = self._apply(mutate, "Failed to remove item from cart")
        if removed:
            self.notifications.product_removed_from_cart(removed[0].product_name or product_id)
        return cart

    def clear(self, notify: bool = True) -> Cart:
        """
        Empty the cart.

        With notify=False no shopper notification is emitted; checkout
        reports its own outcome.
        """
        return self._apply(lambda lines: [], "Failed to clear cart", notify=notify)

    def _apply(
        self,
        mutate: Callable[[list[CartLine]], list[CartLine]],
        error_message: str,
        notify: bool = True,
    ) -> Cart:
        try:
            lines = mutate(self.store.load())
            cart = build_cart(lines, self.settings)
            cart.persisted = self.store.save(cart)
        except Exception as e:
            logger.error(f"{error_message}: {e}")
            if notify:
                self.notifications.error(error_message)
            raise CartOperationError(error_message) from e

        if not cart.persisted and notify:
            self.notifications.cart_not_saved()
        return cart
