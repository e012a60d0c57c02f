from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.core.notifications import NotificationCenter
from storefront.database.carts import CartStore
from storefront.database.orders import OrderHistoryStore
from storefront.database.storage import MemoryStorage
from storefront.models.cart import CartItem, Customization
from storefront.models.checkout import ShippingAddress
from storefront.services.cart_service import CartService
from storefront.services.checkout import CheckoutProcessor

FIXED_NOW = datetime(2026, 3, 1, 10, 30, 0)


@pytest.fixture()
def settings():
    return Settings(_env_file=None)


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def notifications():
    return NotificationCenter()


@pytest.fixture()
def cart_store(storage, settings):
    return CartStore(storage, key=settings.cart_storage_key)


@pytest.fixture()
def history(storage, settings):
    return OrderHistoryStore(
        storage,
        key=settings.order_history_storage_key,
        limit=settings.order_history_limit,
    )


@pytest.fixture()
def cart_service(cart_store, settings, notifications):
    return CartService(cart_store, settings, notifications)


@pytest.fixture()
def processor(cart_service, history, settings, notifications):
    return CheckoutProcessor(
        cart_service=cart_service,
        history=history,
        settings=settings,
        notifications=notifications,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture()
def client(cart_service, history, processor, notifications):
    from storefront.main import app
    from storefront.routes import dependencies

    app.dependency_overrides[dependencies.get_cart_service] = lambda: cart_service
    app.dependency_overrides[dependencies.get_order_history] = lambda: history
    app.dependency_overrides[dependencies.get_checkout_processor] = lambda: processor
    app.dependency_overrides[dependencies.get_notifications] = lambda: notifications
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_item(product_id="prod-001", price=1000, customization=None, name="Madhubani Painting"):
    """Helper: a cart item for a handmade product."""
    return CartItem(
        product_id=product_id,
        product_name=name,
        product_image=f"/images/{product_id}.jpg",
        artist_name="Sita Devi",
        price=price,
        customization=Customization(**customization) if customization else None,
    )


def make_address(country="India"):
    """Helper: a shipping address in the given country."""
    return ShippingAddress(
        full_name="Asha Rao",
        address1="12 MG Road",
        city="Bengaluru",
        state="Karnataka",
        postal_code="560001",
        country=country,
        phone="+91-9000000000",
    )
