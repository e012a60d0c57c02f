"""Cart API routes for the storefront"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.exceptions import CartOperationError
from ..models.cart import (
    AddToCartRequest,
    CartResponse,
    Customization,
    UpdateCartItemRequest,
)
from ..models.checkout import QuoteRequest, QuoteResponse
from ..services.cart_service import CartService
from .dependencies import get_cart_service

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def customization_query(
    size: Optional[str] = Query(None),
    color: Optional[str] = Query(None),
    personal_message: Optional[str] = Query(None),
) -> Optional[Customization]:
    """Customization identifying a line, taken from query parameters"""
    if size is None and color is None and personal_message is None:
        return None
    return Customization(size=size, color=color, personal_message=personal_message)


@router.get("", response_model=CartResponse)
def get_cart(service: CartService = Depends(get_cart_service)):
    """Get the current cart"""
    return CartResponse(cart=service.get_cart())


@router.post("/items", response_model=CartResponse)
def add_to_cart(
    request: AddToCartRequest,
    service: CartService = Depends(get_cart_service),
):
    """Add an item to the cart"""
    try:
        cart = service.add_item(request.item, request.quantity)
    except CartOperationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    name = request.item.product_name or request.item.product_id
    return CartResponse(
        cart=cart,
        message=f"Added {request.quantity}x {name} to cart",
        persisted=cart.persisted,
    )


@router.put("/items/{product_id}", response_model=CartResponse)
def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    service: CartService = Depends(get_cart_service),
):
    """Update item quantity in cart"""
    try:
        cart = service.update_item(product_id, request.quantity, request.customization)
    except CartOperationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return CartResponse(cart=cart, message="Cart updated", persisted=cart.persisted)


@router.delete("/items/{product_id}", response_model=CartResponse)
def remove_from_cart(
    product_id: str,
    customization: Optional[Customization] = Depends(customization_query),
    service: CartService = Depends(get_cart_service),
):
    """Remove an item from the cart"""
    try:
        cart = service.remove_item(product_id, customization)
    except CartOperationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return CartResponse(cart=cart, message="Item removed", persisted=cart.persisted)


@router.delete("", response_model=CartResponse)
def clear_cart(service: CartService = Depends(get_cart_service)):
    """Clear all items from cart"""
    try:
        cart = service.clear()
    except CartOperationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return CartResponse(cart=cart, message="Cart cleared", persisted=cart.persisted)


@router.post("/quote", response_model=QuoteResponse)
def quote_cart(
    request: QuoteRequest,
    service: CartService = Depends(get_cart_service),
):
    """Price the current cart for a shipping destination"""
    cart = service.quote(request.shipping_address)
    threshold = service.settings.free_shipping_threshold
    return QuoteResponse(
        cart=cart,
        free_shipping_threshold=threshold,
        amount_to_free_shipping=max(threshold - cart.subtotal, 0),
    )
