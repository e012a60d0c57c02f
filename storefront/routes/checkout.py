"""Checkout API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.exceptions import CheckoutError, InvalidStatusTransition, OrderHistoryError
from ..database.orders import OrderHistoryStore
from ..models.checkout import (
    CheckoutRequest,
    CheckoutResponse,
    Order,
    UpdateOrderStatusRequest,
)
from ..services.checkout import CheckoutProcessor
from .dependencies import get_checkout_processor, get_order_history

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutResponse)
def checkout(
    request: CheckoutRequest,
    processor: CheckoutProcessor = Depends(get_checkout_processor),
):
    """
    Place an order for the current cart.

    The cart is priced for the shipping address first, so the order carries
    the totals shown at confirmation.
    """
    cart = processor.cart_service.quote(request.shipping_address)
    if cart.is_empty:
        raise HTTPException(status_code=400, detail="Cart is empty")

    try:
        order = processor.process_checkout(
            cart=cart,
            shipping_address=request.shipping_address,
            payment_method=request.payment_method,
        )
    except CheckoutError as e:
        logger.error(f"Checkout failed: {e}")
        return CheckoutResponse(success=False, error_message=str(e))

    return CheckoutResponse(success=True, order=order)


@router.get("/orders/{order_id}", response_model=Order)
def get_order(
    order_id: str,
    history: OrderHistoryStore = Depends(get_order_history),
):
    """Get order details"""
    order = history.get(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/orders", response_model=list[Order])
def list_orders(history: OrderHistoryStore = Depends(get_order_history)):
    """List recent orders, newest first"""
    return history.all()


@router.patch("/orders/{order_id}/status", response_model=Order)
def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    history: OrderHistoryStore = Depends(get_order_history),
):
    """Advance an order to its next fulfillment stage"""
    try:
        order = history.update_status(order_id, request.status)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    except OrderHistoryError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
