"""Shopper-facing notifications emitted by the cart and checkout services"""

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# Display time in milliseconds per type
DEFAULT_DURATIONS = {
    NotificationType.SUCCESS: 5000,
    NotificationType.ERROR: 7000,
    NotificationType.WARNING: 6000,
    NotificationType.INFO: 5000,
}


@dataclass
class Notification:
    """A message to show the shopper"""
    type: NotificationType
    title: str
    description: Optional[str] = None
    duration: int = 5000
    id: str = field(default_factory=lambda: f"notification-{uuid.uuid4().hex[:12]}")
    created_at: datetime = field(default_factory=datetime.utcnow)


NotificationListener = Callable[[Notification], None]


class NotificationCenter:
    """Fans notifications out to subscribers and keeps the most recent ones"""

    def __init__(self, max_recent: int = 20):
        self._listeners: list[NotificationListener] = []
        self._recent: deque[Notification] = deque(maxlen=max_recent)

    def subscribe(self, listener: NotificationListener) -> Callable[[], None]:
        """Register a listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def recent(self, limit: int = 10) -> list[Notification]:
        """Most recent notifications, newest first"""
        return list(reversed(self._recent))[:limit]

    def notify(
        self,
        type: NotificationType,
        title: str,
        description: Optional[str] = None,
        duration: Optional[int] = None,
    ) -> Notification:
        notification = Notification(
            type=type,
            title=title,
            description=description,
            duration=duration if duration is not None else DEFAULT_DURATIONS[type],
        )
        self._recent.append(notification)
        for listener in list(self._listeners):
            try:
                listener(notification)
            except Exception:
                logger.exception(f"Notification listener failed for {notification.id}")
        return notification

    def success(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(NotificationType.SUCCESS, title, description)

    def error(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(NotificationType.ERROR, title, description)

    def warning(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(NotificationType.WARNING, title, description)

    def info(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(NotificationType.INFO, title, description)

    # ==================== Commerce events ====================

    def product_added_to_cart(self, product_name: str) -> Notification:
        return self.success("Added to Cart!", f"{product_name} has been added to your cart")

    def product_removed_from_cart(self, product_name: str) -> Notification:
        return self.info("Removed from Cart", f"{product_name} has been removed from your cart")

    def cart_not_saved(self) -> Notification:
        return self.warning(
            "Cart Not Saved",
            "Your cart was updated but may not be there after a reload",
        )

    def order_placed(self, order_id: str) -> Notification:
        return self.success("Order Placed Successfully!", f"Your order {order_id} has been placed")

    def checkout_failed(self, reason: Optional[str] = None) -> Notification:
        return self.error(
            "Checkout Failed",
            reason or "There was an issue placing your order. Please try again.",
        )
