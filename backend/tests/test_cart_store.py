"""
Tests for the cart store
"""
import json
import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from schemas.cart import LineIdentity, ProductSnapshot
from utils.cart_store import CartStore, DEFAULT_MAX_QUANTITY
from utils.errors import InvalidQuantity


class TestAddItem:
    """Tests for merging and creating lines."""

    def test_same_identity_merges_into_one_line(self, cart, tee):
        cart.add_item(tee, 2, "M", "Black")
        line = cart.add_item(tee, 1, "M", "Black")

        assert len(cart) == 1
        assert line.quantity == 3

    def test_different_size_creates_separate_line(self, cart, tee):
        first = cart.add_item(tee, 1, "M", "Black")
        second = cart.add_item(tee, 1, "L", "Black")

        assert len(cart) == 2
        assert first.line_id != second.line_id

    def test_new_line_snapshots_product(self, cart, tee):
        line = cart.add_item(tee, 1)

        assert line.product_id == "P1"
        assert line.name == "Classic Tee"
        assert line.unit_price == Decimal("19.99")
        assert line.image_ref == "tee-front.jpg"
        assert line.max_quantity == 5
        assert line.size is None and line.color is None

    def test_image_falls_back_and_stock_defaults(self, cart, mug):
        line = cart.add_item(mug)

        assert line.image_ref == "mug.jpg"
        assert line.max_quantity == DEFAULT_MAX_QUANTITY
        assert line.quantity == 1

    def test_max_quantity_is_not_enforced(self, cart, tee):
        line = cart.add_item(tee, 4)
        line = cart.add_item(tee, 4)

        assert line.quantity == 8
        assert line.max_quantity == 5

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_invalid_quantity_raises(self, cart, tee, quantity):
        with pytest.raises(InvalidQuantity):
            cart.add_item(tee, quantity)
        assert len(cart) == 0

    @pytest.mark.parametrize("price", ["abc", None, "", float("nan")])
    def test_unparseable_price_is_rejected(self, price):
        with pytest.raises(ValidationError):
            ProductSnapshot(id="P1", name="Tee", price=price)

    def test_float_price_keeps_its_string_form(self, cart):
        line = cart.add_item(ProductSnapshot(id="P1", name="Tee", price=19.99), 1)
        assert line.unit_price == Decimal("19.99")

    def test_delimiter_in_color_does_not_collide(self, cart):
        # "a-b" + "c" and "a" + "b-c" must stay distinct lines
        product = ProductSnapshot(id="P9", name="Scarf", price="12.00")
        cart.add_item(product, 1, "a-b", "c")
        cart.add_item(product, 1, "a", "b-c")

        assert len(cart) == 2

    def test_identity_is_structural(self, cart, tee):
        line = cart.add_item(tee, 1, "M", "Black")
        assert line.identity == LineIdentity("P1", "M", "Black")


class TestUpdateAndRemove:
    """Tests for quantity updates, removal and clearing."""

    def test_update_replaces_quantity(self, cart, tee):
        line = cart.add_item(tee, 1)
        cart.update_quantity(line.line_id, 4)

        assert cart.get_line(line.line_id).quantity == 4

    def test_update_to_zero_removes_line(self, cart, tee, mug):
        line = cart.add_item(tee, 2, "M", "Black")
        cart.add_item(mug, 1)

        cart.update_quantity(line.line_id, 0)

        assert len(cart) == 1
        assert cart.find_line("P1", "M", "Black") is None

    def test_update_negative_removes_line(self, cart, tee):
        line = cart.add_item(tee, 2)
        cart.update_quantity(line.line_id, -3)
        assert len(cart) == 0

    def test_update_unknown_line_is_noop(self, cart, tee):
        cart.add_item(tee, 2)
        cart.update_quantity("missing", 5)

        assert cart.get_item_count() == 2

    def test_update_after_removal_does_not_raise(self, cart, tee):
        line = cart.add_item(tee, 1)
        cart.remove_item(line.line_id)
        cart.update_quantity(line.line_id, 3)
        assert len(cart) == 0

    def test_remove_unknown_line_leaves_cart_unchanged(self, cart, tee, storage):
        cart.add_item(tee, 2)
        before = storage.get_item("cart")

        cart.remove_item("missing")

        assert len(cart) == 1
        assert storage.get_item("cart") == before

    def test_remove_is_idempotent(self, cart, tee):
        line = cart.add_item(tee, 1)
        cart.remove_item(line.line_id)
        cart.remove_item(line.line_id)
        assert len(cart) == 0

    def test_clear_empties_cart(self, cart, tee, mug):
        cart.add_item(tee, 1)
        cart.add_item(mug, 3)

        cart.clear()

        assert len(cart) == 0
        assert cart.get_item_count() == 0
        assert cart.get_total() == Decimal("0.00")


class TestQueries:
    """Tests for totals, counts and lookups."""

    def test_item_count_sums_quantities(self, cart, tee, mug):
        cart.add_item(tee, 3)
        cart.add_item(mug, 2)

        assert cart.get_item_count() == 5
        assert len(cart) == 2

    def test_total_sums_price_times_quantity(self, cart, tee, mug):
        cart.add_item(tee, 2)   # 39.98
        cart.add_item(mug, 3)   # 22.50

        assert cart.get_total() == Decimal("62.48")

    def test_total_rounds_once_not_per_line(self, cart):
        # 100 lines of 0.105: exact sum 10.50, per-line rounding would give 11.00
        for i in range(100):
            cart.add_item(ProductSnapshot(id=f"P{i}", name=f"Sticker {i}", price="0.105"), 1)

        assert cart.get_total() == Decimal("10.50")

    def test_total_stays_within_a_cent_for_float_prices(self, cart):
        for i in range(100):
            cart.add_item(ProductSnapshot(id=i, name=f"Pin {i}", price=0.1), 3)

        assert abs(cart.get_total() - Decimal("30.00")) <= Decimal("0.01")

    def test_find_line_and_is_in_cart(self, cart, tee):
        line = cart.add_item(tee, 1, "S", "White")

        assert cart.find_line("P1", "S", "White") is line
        assert cart.is_in_cart("P1", "S", "White")
        assert not cart.is_in_cart("P1", "S")
        assert cart.find_line("P1") is None


class TestPersistence:
    """Tests for the storage slot mirror."""

    def test_every_mutation_is_written(self, cart, tee, storage):
        line = cart.add_item(tee, 2, "M", "Black")
        stored = json.loads(storage.get_item("cart"))

        assert stored == [{
            "lineId": line.line_id,
            "productId": "P1",
            "name": "Classic Tee",
            "unitPrice": "19.99",
            "imageRef": "tee-front.jpg",
            "size": "M",
            "color": "Black",
            "quantity": 2,
            "maxQuantity": 5,
        }]

        cart.update_quantity(line.line_id, 0)
        assert json.loads(storage.get_item("cart")) == []

    def test_round_trip_reproduces_lines(self, cart, tee, mug, storage):
        cart.add_item(tee, 2, "M", "Black")
        cart.add_item(tee, 1, "L", "Black")
        cart.add_item(mug, 4)
        original = sorted((line.model_dump() for line in cart.lines), key=lambda d: d["line_id"])
        payload = storage.get_item("cart")

        cart.clear()
        storage.set_item("cart", payload)
        restored = CartStore(storage)

        assert sorted((line.model_dump() for line in restored.lines), key=lambda d: d["line_id"]) == original

    def test_missing_payload_gives_empty_cart(self, storage):
        assert len(CartStore(storage)) == 0

    @pytest.mark.parametrize("payload", [
        "{not json",
        '{"lineId": "x"}',
        '[{"lineId": "x", "productId": "P1"}]',
        '[{"lineId": "x", "productId": "P1", "name": "Tee", "unitPrice": "1.00", "quantity": 0}]',
        '[{"lineId": "x", "productId": "P1", "name": "Tee", "unitPrice": "garbage", "quantity": 1}]',
        '[{"lineId": "x", "productId": "P1", "name": "Tee", "unitPrice": null, "quantity": 1}]',
    ])
    def test_corrupt_payload_gives_empty_cart(self, storage, payload, caplog):
        storage.set_item("cart", payload)

        with caplog.at_level(logging.WARNING, logger="utils.cart_store"):
            restored = CartStore(storage)

        assert len(restored) == 0
        assert "Error loading cart" in caplog.text

    def test_loaded_duplicates_are_merged(self, storage):
        storage.set_item("cart", json.dumps([
            {"lineId": "a", "productId": "P1", "name": "Tee", "unitPrice": "10.00", "size": "M", "quantity": 1},
            {"lineId": "b", "productId": "P1", "name": "Tee", "unitPrice": "10.00", "size": "M", "quantity": 2},
        ]))

        restored = CartStore(storage)

        assert len(restored) == 1
        assert restored.find_line("P1", "M").quantity == 3

    def test_numeric_prices_in_payload_are_accepted(self, storage):
        storage.set_item("cart", json.dumps([
            {"lineId": "a", "productId": 7, "name": "Cap", "unitPrice": 14.99, "quantity": 2},
        ]))

        restored = CartStore(storage)

        assert restored.get_total() == Decimal("29.98")
        assert restored.find_line(7) is not None
