"""Cart models for the storefront"""

import json
from typing import Optional

from pydantic import BaseModel, Field


class Customization(BaseModel):
    """Shopper-selected options for a handmade product"""
    size: Optional[str] = None
    color: Optional[str] = None
    personal_message: Optional[str] = None

    def canonical(self) -> str:
        """Stable encoding used to compare customizations"""
        fields = {k: v for k, v in self.model_dump().items() if v not in (None, "")}
        if not fields:
            return ""
        return json.dumps(fields, sort_keys=True, separators=(",", ":"))


def identity_key(product_id: str, customization: Optional[Customization] = None) -> tuple[str, str]:
    """Key that decides whether two lines are the same selection"""
    return product_id, customization.canonical() if customization else ""


class CartItem(BaseModel):
    """Product configuration to put in a cart (no quantity yet)"""
    product_id: str = Field(min_length=1)
    product_name: str = ""
    product_image: str = ""
    artist_name: str = ""
    price: int = Field(ge=0)
    customization: Optional[Customization] = None


class CartLine(CartItem):
    """Item in a shopping cart"""
    quantity: int = Field(gt=0)

    @property
    def identity_key(self) -> tuple[str, str]:
        return identity_key(self.product_id, self.customization)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


class Cart(BaseModel):
    """Shopping cart with derived totals"""
    lines: list[CartLine] = []
    subtotal: int = 0
    shipping: int = 0
    tax: int = 0
    total: int = 0
    item_count: int = 0
    # Whether the write that produced this cart reached storage; never serialized
    persisted: bool = Field(default=True, exclude=True)

    @property
    def is_empty(self) -> bool:
        return not self.lines


class StoredCart(BaseModel):
    """Persisted cart record. Only the lines are trusted on load."""
    lines: list[CartLine] = []


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    item: CartItem
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity. Zero or less removes the line."""
    quantity: int
    customization: Optional[Customization] = None


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
    persisted: bool = True
