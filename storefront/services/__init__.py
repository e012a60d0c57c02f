# Services

from .totals import (
    build_cart,
    calculate_item_count,
    calculate_shipping,
    calculate_subtotal,
    calculate_tax,
)
from .cart_service import CartService
from .checkout import CheckoutProcessor

__all__ = [
    "build_cart",
    "calculate_item_count",
    "calculate_shipping",
    "calculate_subtotal",
    "calculate_tax",
    "CartService",
    "CheckoutProcessor",
]
