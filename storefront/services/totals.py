"""
Cart totals.

Pure functions deriving subtotal, shipping, tax and grand total from cart
lines and an optional destination. Amounts are whole currency units.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from ..core.config import Settings
from ..models.cart import Cart, CartLine
from ..models.checkout import ShippingAddress


def calculate_subtotal(lines: Iterable[CartLine]) -> int:
    return sum(line.price * line.quantity for line in lines)


def calculate_item_count(lines: Iterable[CartLine]) -> int:
    return sum(line.quantity for line in lines)


def calculate_shipping(
    lines: Iterable[CartLine],
    settings: Settings,
    address: Optional[ShippingAddress] = None,
) -> int:
    """Free at or above the threshold, flat rate otherwise"""
    lines = list(lines)
    if not lines:
        return 0

    if calculate_subtotal(lines) >= settings.free_shipping_threshold:
        return 0

    if address and not settings.is_domestic(address.country):
        return settings.international_shipping_cost

    return settings.domestic_shipping_cost


def calculate_tax(
    lines: Iterable[CartLine],
    settings: Settings,
    address: Optional[ShippingAddress] = None,
) -> int:
    """
    GST on the subtotal, rounded half-up to a whole unit.

    International orders are not taxed here; the listed price already
    includes it.
    """
    if address and not settings.is_domestic(address.country):
        return 0

    tax = Decimal(calculate_subtotal(lines)) * settings.tax_rate
    return int(tax.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_cart(
    lines: Iterable[CartLine],
    settings: Settings,
    address: Optional[ShippingAddress] = None,
) -> Cart:
    """Cart with every derived field recomputed from its lines"""
    lines = list(lines)
    subtotal = calculate_subtotal(lines)
    shipping = calculate_shipping(lines, settings, address)
    tax = calculate_tax(lines, settings, address)

    return Cart(
        lines=lines,
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
        item_count=calculate_item_count(lines),
    )
