"""Order history storage for the storefront"""

import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import InvalidStatusTransition, OrderHistoryError
from ..models.checkout import Order, OrderStatus
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

_orders_adapter = TypeAdapter(list[Order])


class OrderHistoryStore:
    """Bounded, most-recent-first sequence of placed orders"""

    def __init__(self, storage: KeyValueStorage, key: str = "dots_order_history", limit: int = 50):
        self.storage = storage
        self.key = key
        self.limit = limit

    def all(self) -> list[Order]:
        """Stored orders, newest first. Unreadable history reads as empty."""
        try:
            raw = self.storage.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading order history: {e}")
            return []

        if not raw:
            return []

        try:
            return _orders_adapter.validate_json(raw)[: self.limit]
        except ValidationError as e:
            logger.warning(f"Discarding malformed order history under {self.key!r}: {e.error_count()} errors")
            return []

    def get(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return next((order for order in self.all() if order.order_id == order_id), None)

    def append(self, order: Order) -> Order:
        """Record a new order at the front, evicting the oldest past the limit"""
        history = self.all()
        history.insert(0, order)
        del history[self.limit :]
        self._write(history)
        logger.info(f"Recorded order {order.order_id} ({len(history)} in history)")
        return order

    def remove(self, order_id: str) -> bool:
        """Drop an order from history"""
        history = self.all()
        remaining = [order for order in history if order.order_id != order_id]
        if len(remaining) == len(history):
            return False
        self._write(remaining)
        return True

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """Move an order to the next fulfillment stage"""
        history = self.all()
        order = next((o for o in history if o.order_id == order_id), None)
        if not order:
            return None

        if not order.status.can_transition_to(status):
            raise InvalidStatusTransition(order_id, order.status.value, status.value)

        order.status = status
        self._write(history)
        logger.info(f"Order {order_id} is now {status.value}")
        return order

    def _write(self, history: list[Order]) -> None:
        try:
            self.storage.set_item(self.key, _orders_adapter.dump_json(history).decode())
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error saving order history: {e}")
            raise OrderHistoryError("Failed to save order history") from e
