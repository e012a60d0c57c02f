"""
Checkout Processor

Turns a finalized cart into an order, records it and clears the active cart.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..core.config import Settings
from ..core.exceptions import CartOperationError, CheckoutError
from ..core.notifications import NotificationCenter
from ..database.orders import OrderHistoryStore
from ..models.cart import Cart
from ..models.checkout import Order, OrderStatus, PaymentMethod, ShippingAddress
from .cart_service import CartService

logger = logging.getLogger(__name__)


class CheckoutProcessor:
    """Sole creator of orders"""

    def __init__(
        self,
        cart_service: CartService,
        history: OrderHistoryStore,
        settings: Settings,
        notifications: Optional[NotificationCenter] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.cart_service = cart_service
        self.history = history
        self.settings = settings
        self.notifications = notifications or cart_service.notifications
        self.clock = clock

    def process_checkout(
        self,
        cart: Cart,
        shipping_address: ShippingAddress,
        payment_method: PaymentMethod,
    ) -> Order:
        """
        Create an order from a cart.

        Lines and totals are copied as the shopper saw them; nothing is
        recomputed. The order is recorded before the cart is cleared, and if
        either step fails neither takes effect.

        Raises:
            CheckoutError: the order could not be recorded or the cart could
                not be cleared
        """
        now = self.clock()
        order = Order(
            order_id=self._next_order_id(now),
            lines=[line.model_copy(deep=True) for line in cart.lines],
            shipping_address=shipping_address,
            subtotal=cart.subtotal,
            shipping=cart.shipping,
            tax=cart.tax,
            total=cart.total,
            payment_method=payment_method,
            status=OrderStatus.PENDING,
            created_at=now,
            estimated_delivery=now + timedelta(days=self.settings.delivery_lead_days),
        )

        try:
            self.history.append(order)
        except Exception as e:
            logger.error(f"Error processing checkout: {e}")
            self.notifications.checkout_failed()
            raise CheckoutError("Failed to process checkout") from e

        try:
            cleared = self.cart_service.clear(notify=False)
        except CartOperationError as e:
            self._roll_back(order)
            raise CheckoutError("Failed to process checkout") from e

        if not cleared.persisted:
            self._roll_back(order)
            raise CheckoutError("Failed to process checkout")

        logger.info(
            f"Order {order.order_id} created: {self.settings.currency} {order.total} "
            f"via {order.payment_method.value}"
        )
        self.notifications.order_placed(order.order_id)
        return order

    def _roll_back(self, order: Order) -> None:
        logger.error(f"Cart not cleared after order {order.order_id}, rolling back")
        try:
            self.history.remove(order.order_id)
        except Exception:
            logger.exception(f"Could not remove order {order.order_id} from history")
        self.notifications.checkout_failed()

    def _next_order_id(self, now: datetime) -> str:
        """Time-based id, bumped past any id already in history"""
        taken = {order.order_id for order in self.history.all()}
        stamp = int(now.timestamp() * 1000)
        while f"ORD-{stamp}" in taken:
            stamp += 1
        return f"ORD-{stamp}"
