# Storefront Models

from .cart import (
    Cart,
    CartItem,
    CartLine,
    Customization,
    StoredCart,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    identity_key,
)
from .checkout import (
    Order,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
    CheckoutRequest,
    CheckoutResponse,
    QuoteRequest,
    QuoteResponse,
    UpdateOrderStatusRequest,
)

__all__ = [
    "Cart",
    "CartItem",
    "CartLine",
    "Customization",
    "StoredCart",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "identity_key",
    "Order",
    "OrderStatus",
    "PaymentMethod",
    "ShippingAddress",
    "CheckoutRequest",
    "CheckoutResponse",
    "QuoteRequest",
    "QuoteResponse",
    "UpdateOrderStatusRequest",
]
