"""Storefront errors"""


class StorefrontError(Exception):
    """Base class for cart and checkout errors"""


class InvalidQuantityError(StorefrontError, ValueError):
    """Quantity added to a cart must be a positive integer"""


class CartOperationError(StorefrontError):
    """A cart mutation failed because the store raised unexpectedly"""


class CheckoutError(StorefrontError):
    """Checkout aborted; the active cart was left untouched"""


class OrderHistoryError(StorefrontError):
    """Order history could not be written"""


class InvalidStatusTransition(StorefrontError):
    """Order status change that skips or reverses a fulfillment stage"""

    def __init__(self, order_id: str, current: str, requested: str):
        self.order_id = order_id
        self.current = current
        self.requested = requested
        super().__init__(f"Order {order_id} cannot move from {current} to {requested}")


class StorageQuotaExceeded(OSError):
    """Write rejected because the storage backend is full"""
