"""Integration tests for the storefront API via TestClient."""

ADDRESS = {
    "full_name": "Asha Rao",
    "address1": "12 MG Road",
    "city": "Bengaluru",
    "state": "Karnataka",
    "postal_code": "560001",
    "country": "India",
}


def _add_item(client, product_id="prod-001", price=1000, quantity=1, customization=None):
    """Helper: POST /api/cart/items."""
    item = {
        "product_id": product_id,
        "product_name": "Blue Pottery Bowl",
        "product_image": "/images/bowl.jpg",
        "artist_name": "Kripal Singh",
        "price": price,
    }
    if customization:
        item["customization"] = customization
    response = client.post("/api/cart/items", json={"item": item, "quantity": quantity})
    assert response.status_code == 200
    return response.json()


class TestCartEndpoints:
    def test_get_empty_cart(self, client):
        response = client.get("/api/cart")
        assert response.status_code == 200
        assert response.json()["cart"]["lines"] == []

    def test_add_item(self, client):
        body = _add_item(client, price=1000, quantity=2)
        assert body["cart"]["subtotal"] == 2000
        assert body["cart"]["total"] == 2360
        assert body["persisted"] is True
        assert body["message"] == "Added 2x Blue Pottery Bowl to cart"

    def test_add_zero_quantity_is_rejected(self, client):
        response = client.post(
            "/api/cart/items",
            json={"item": {"product_id": "p", "price": 10}, "quantity": 0},
        )
        assert response.status_code == 422

    def test_update_item(self, client):
        _add_item(client, quantity=1)
        response = client.put("/api/cart/items/prod-001", json={"quantity": 4})
        assert response.status_code == 200
        assert response.json()["cart"]["item_count"] == 4

    def test_update_to_zero_removes(self, client):
        _add_item(client)
        response = client.put("/api/cart/items/prod-001", json={"quantity": 0})
        assert response.json()["cart"]["lines"] == []

    def test_remove_customized_item(self, client):
        _add_item(client, customization={"size": "L", "color": "blue"})
        response = client.delete("/api/cart/items/prod-001", params={"color": "blue", "size": "L"})
        assert response.status_code == 200
        assert response.json()["cart"]["lines"] == []

    def test_clear_cart(self, client):
        _add_item(client)
        response = client.delete("/api/cart")
        assert response.json()["cart"]["item_count"] == 0

    def test_quote_international(self, client):
        _add_item(client, price=1500)
        response = client.post(
            "/api/cart/quote",
            json={"shipping_address": {**ADDRESS, "country": "Singapore"}},
        )
        body = response.json()
        assert body["cart"]["shipping"] == 500
        assert body["cart"]["tax"] == 0
        assert body["amount_to_free_shipping"] == 500


class TestCheckoutEndpoints:
    def test_checkout_empty_cart(self, client):
        response = client.post("/api/checkout", json={"shipping_address": ADDRESS})
        assert response.status_code == 400

    def test_checkout(self, client):
        _add_item(client, price=3000)
        response = client.post(
            "/api/checkout",
            json={"shipping_address": ADDRESS, "payment_method": "upi"},
        )
        body = response.json()
        assert body["success"] is True
        assert body["order"]["total"] == 3540
        assert body["order"]["status"] == "pending"
        assert client.get("/api/cart").json()["cart"]["lines"] == []

    def test_checkout_uses_destination_pricing(self, client):
        _add_item(client, price=1000)
        response = client.post(
            "/api/checkout",
            json={"shipping_address": {**ADDRESS, "country": "Nepal"}},
        )
        order = response.json()["order"]
        assert (order["shipping"], order["tax"], order["total"]) == (500, 0, 1500)

    def test_order_history_and_lookup(self, client):
        _add_item(client)
        order_id = client.post("/api/checkout", json={"shipping_address": ADDRESS}).json()["order"]["order_id"]

        orders = client.get("/api/checkout/orders").json()
        assert [o["order_id"] for o in orders] == [order_id]
        assert client.get(f"/api/checkout/orders/{order_id}").status_code == 200

    def test_unknown_order(self, client):
        assert client.get("/api/checkout/orders/ORD-0").status_code == 404

    def test_status_transition(self, client):
        _add_item(client)
        order_id = client.post("/api/checkout", json={"shipping_address": ADDRESS}).json()["order"]["order_id"]

        ok = client.patch(f"/api/checkout/orders/{order_id}/status", json={"status": "confirmed"})
        assert ok.json()["status"] == "confirmed"

        skipped = client.patch(f"/api/checkout/orders/{order_id}/status", json={"status": "delivered"})
        assert skipped.status_code == 409


class TestMiscEndpoints:
    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_notifications_feed(self, client):
        _add_item(client)
        feed = client.get("/api/notifications").json()
        assert feed[0]["type"] == "success"
        assert feed[0]["title"] == "Added to Cart!"
