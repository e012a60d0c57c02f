"""Checkout models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .cart import Cart, CartLine


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    @property
    def next_status(self) -> Optional["OrderStatus"]:
        """Following stage in the fulfillment lifecycle, None once delivered"""
        stages = list(OrderStatus)
        index = stages.index(self)
        return stages[index + 1] if index + 1 < len(stages) else None

    def can_transition_to(self, status: "OrderStatus") -> bool:
        return self.next_status == status


class PaymentMethod(str, Enum):
    CARD = "card"
    UPI = "upi"
    NET_BANKING = "net_banking"
    CASH_ON_DELIVERY = "cash_on_delivery"


class ShippingAddress(BaseModel):
    """Shipping address for order"""
    full_name: str
    address1: str
    address2: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str = "India"
    phone: Optional[str] = None


class Order(BaseModel):
    """Placed order. Lines and totals are a snapshot taken at checkout."""
    order_id: str
    lines: list[CartLine]
    shipping_address: ShippingAddress
    subtotal: int
    shipping: int
    tax: int
    total: int
    payment_method: PaymentMethod
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime
    estimated_delivery: datetime


class CheckoutRequest(BaseModel):
    """Request to checkout the current cart"""
    shipping_address: ShippingAddress
    payment_method: PaymentMethod = PaymentMethod.CARD


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None


class QuoteRequest(BaseModel):
    """Request to price the current cart for a destination"""
    shipping_address: Optional[ShippingAddress] = None


class QuoteResponse(BaseModel):
    """Cart priced for a destination"""
    cart: Cart
    free_shipping_threshold: int
    amount_to_free_shipping: int = Field(ge=0)


class UpdateOrderStatusRequest(BaseModel):
    """Request to move an order to its next fulfillment stage"""
    status: OrderStatus
