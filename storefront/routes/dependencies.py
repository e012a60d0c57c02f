"""Service wiring for API routes"""

from typing import Optional

from ..core.config import get_settings
from ..core.notifications import NotificationCenter
from ..database.carts import CartStore
from ..database.orders import OrderHistoryStore
from ..database.storage import KeyValueStorage, create_storage
from ..services.cart_service import CartService
from ..services.checkout import CheckoutProcessor

# Created on first use; tests swap these via app.dependency_overrides
storage: Optional[KeyValueStorage] = None
notifications: Optional[NotificationCenter] = None
cart_service: Optional[CartService] = None
order_history: Optional[OrderHistoryStore] = None
checkout_processor: Optional[CheckoutProcessor] = None


def get_storage() -> KeyValueStorage:
    """Get or create the storage backend"""
    global storage
    if storage is None:
        settings = get_settings()
        storage = create_storage(settings.storage_dir, settings.storage_quota_bytes)
    return storage


def get_notifications() -> NotificationCenter:
    """Get or create the notification center"""
    global notifications
    if notifications is None:
        notifications = NotificationCenter()
    return notifications


def get_cart_service() -> CartService:
    """Get or create cart service"""
    global cart_service
    if cart_service is None:
        settings = get_settings()
        cart_service = CartService(
            store=CartStore(get_storage(), key=settings.cart_storage_key),
            settings=settings,
            notifications=get_notifications(),
        )
    return cart_service


def get_order_history() -> OrderHistoryStore:
    """Get or create order history store"""
    global order_history
    if order_history is None:
        settings = get_settings()
        order_history = OrderHistoryStore(
            get_storage(),
            key=settings.order_history_storage_key,
            limit=settings.order_history_limit,
        )
    return order_history


def get_checkout_processor() -> CheckoutProcessor:
    """Get or create checkout processor"""
    global checkout_processor
    if checkout_processor is None:
        checkout_processor = CheckoutProcessor(
            cart_service=get_cart_service(),
            history=get_order_history(),
            settings=get_settings(),
            notifications=get_notifications(),
        )
    return checkout_processor
