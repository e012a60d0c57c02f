"""Tests for cart persistence."""

import json

from storefront.database.carts import CartStore
from storefront.database.storage import FileStorage, MemoryStorage
from storefront.services.cart_service import CartService
from storefront.services.totals import build_cart
from storefront.models.cart import CartLine, Customization


class BrokenStorage(MemoryStorage):
    def get_item(self, key):
        raise OSError("disk unavailable")

    def set_item(self, key, value):
        raise OSError("disk unavailable")


def _lines():
    return [
        CartLine(product_id="p1", product_name="Terracotta Vase", price=1200, quantity=1),
        CartLine(
            product_id="p2",
            product_name="Pashmina Shawl",
            price=800,
            quantity=2,
            customization=Customization(color="indigo"),
        ),
    ]


class TestLoad:
    def test_missing_key_is_empty(self, cart_store):
        assert cart_store.load() == []

    def test_malformed_json_is_empty(self, storage, cart_store):
        storage.set_item("dots_cart", "{not json")
        assert cart_store.load() == []

    def test_wrong_shape_is_empty(self, storage, cart_store):
        storage.set_item("dots_cart", json.dumps({"lines": [{"price": "free"}]}))
        assert cart_store.load() == []

    def test_negative_quantity_is_rejected(self, storage, cart_store):
        storage.set_item(
            "dots_cart",
            json.dumps({"lines": [{"product_id": "p1", "price": 10, "quantity": -1}]}),
        )
        assert cart_store.load() == []

    def test_unreadable_storage_is_empty(self):
        assert CartStore(BrokenStorage()).load() == []

    def test_stored_totals_are_ignored(self, storage, cart_store, settings):
        storage.set_item(
            "dots_cart",
            json.dumps({
                "lines": [{"product_id": "p1", "price": 1000, "quantity": 2}],
                "subtotal": 1,
                "total": 999999,
            }),
        )
        cart = build_cart(cart_store.load(), settings)
        assert cart.subtotal == 2000
        assert cart.total == 2360


class TestSave:
    def test_round_trip(self, cart_store, settings):
        cart = build_cart(_lines(), settings)
        assert cart_store.save(cart) is True

        reloaded = build_cart(cart_store.load(), settings)
        assert reloaded == cart

    def test_writes_lines_and_totals(self, storage, cart_store, settings):
        cart_store.save(build_cart(_lines(), settings))

        stored = json.loads(storage.get_item("dots_cart"))
        assert [line["product_id"] for line in stored["lines"]] == ["p1", "p2"]
        assert stored["subtotal"] == 2800
        assert stored["item_count"] == 3

    def test_write_failure_returns_false(self, settings):
        store = CartStore(BrokenStorage())
        assert store.save(build_cart(_lines(), settings)) is False

    def test_quota_exceeded_returns_false(self, settings):
        store = CartStore(MemoryStorage(quota_bytes=10))
        assert store.save(build_cart(_lines(), settings)) is False

    def test_clear_writes_empty_cart(self, cart_store, settings):
        cart_store.save(build_cart(_lines(), settings))
        assert cart_store.clear() is True
        assert cart_store.load() == []


class TestFileStorage:
    def test_round_trip_through_files(self, tmp_path, settings):
        store = CartStore(FileStorage(str(tmp_path)))
        cart = build_cart(_lines(), settings)
        store.save(cart)

        assert (tmp_path / "dots_cart.json").exists()
        assert CartStore(FileStorage(str(tmp_path))).load() == cart.lines

    def test_missing_file_is_empty(self, tmp_path):
        assert CartStore(FileStorage(str(tmp_path))).load() == []

    def test_remove_item(self, tmp_path):
        storage = FileStorage(str(tmp_path))
        storage.set_item("dots_cart", "{}")
        storage.remove_item("dots_cart")
        assert storage.get_item("dots_cart") is None

    def test_undecodable_file_is_empty(self, tmp_path, settings):
        (tmp_path / "dots_cart.json").write_bytes(b"\xff\xfe\x00garbage")
        storage = FileStorage(str(tmp_path))

        assert CartStore(storage).load() == []
        assert CartService(CartStore(storage), settings).get_cart().lines == []


class TestDuplicateLines:
    def test_duplicate_lines_merge_on_load(self, storage, cart_store):
        line = {"product_id": "p1", "price": 100, "quantity": 1}
        storage.set_item("dots_cart", json.dumps({"lines": [line, line]}))

        lines = cart_store.load()
        assert len(lines) == 1
        assert lines[0].quantity == 2

    def test_merge_keeps_first_position(self, storage, cart_store):
        lines = [
            {"product_id": "a", "price": 100, "quantity": 1},
            {"product_id": "b", "price": 200, "quantity": 1},
            {"product_id": "a", "price": 100, "quantity": 3},
        ]
        storage.set_item("dots_cart", json.dumps({"lines": lines}))

        loaded = cart_store.load()
        assert [(line.product_id, line.quantity) for line in loaded] == [("a", 4), ("b", 1)]
