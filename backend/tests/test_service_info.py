"""
Tests for service classification and the failed-call history
"""
from datetime import datetime, timedelta, timezone

import pytest

from schemas.service_info import ServiceCallRecord, ServiceDescriptor
from utils.service_catalog import FALLBACK_SERVICE, SERVICE_CATALOG, classify
from utils.service_history import ServiceHistory


def make_record(name: str, minutes: int = 0) -> ServiceCallRecord:
    return ServiceCallRecord(
        service_name=name,
        description="",
        endpoint="http://shop.test/api/x",
        method="GET",
        timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes),
        connection_steps=[],
        original_error="down",
    )


class TestClassify:

    @pytest.mark.parametrize("path, expected", [
        ("/auth/login", "Authentication Service"),
        ("/products/42", "Product Catalog Service"),
        ("/products/category/shoes", "Product Catalog Service"),
        ("/orders/17/track", "Order Management Service"),
        ("/payments/confirm", "Payment Processing Service"),
        ("/cart/items/3", "Shopping Cart Service"),
        ("/users/otp", "User Management Service"),
        ("/inventory/low-stock", "Inventory Management Service"),
        ("/emails/templates", "Email Notification Service"),
        ("/analytics/sales/month", "Analytics & Reporting Service"),
        ("/wishlist", "Wishlist Service"),
        ("/reviews/product/9", "Review & Rating Service"),
        ("/coupons/validate", "Coupon & Discount Service"),
    ])
    def test_known_paths(self, path, expected):
        assert classify(path).name == expected

    def test_unknown_path_falls_back(self):
        assert classify("/health") is FALLBACK_SERVICE
        assert FALLBACK_SERVICE.name == "Backend API Service"

    def test_first_match_wins(self):
        catalog = [
            ServiceDescriptor(path="/orders", name="Orders", description="", connection_steps=[]),
            ServiceDescriptor(path="/products", name="Products", description="", connection_steps=[]),
        ]
        assert classify("/orders/products/1", catalog).name == "Orders"

    def test_every_entry_has_steps(self):
        for service in SERVICE_CATALOG:
            assert len(service.connection_steps) == 4


class TestServiceHistory:

    def test_newest_first_and_capped(self):
        history = ServiceHistory(limit=3)
        for i in range(5):
            history.record(make_record(f"S{i}", minutes=i))

        assert [r.service_name for r in history.records] == ["S4", "S3", "S2"]
        assert history.latest.service_name == "S4"

    def test_stats(self):
        history = ServiceHistory()
        history.record(make_record("Orders", minutes=1))
        history.record(make_record("Products", minutes=2))
        history.record(make_record("Orders", minutes=3))

        stats = history.stats()

        assert stats.total_calls == 3
        assert stats.unique_services == 2
        assert stats.service_breakdown == {"Orders": 2, "Products": 1}
        assert stats.last_call == datetime(2026, 1, 1, 0, 3, tzinfo=timezone.utc)

    def test_empty_stats(self):
        stats = ServiceHistory().stats()
        assert stats.total_calls == 0
        assert stats.last_call is None

    def test_clear(self):
        history = ServiceHistory()
        history.record(make_record("Orders"))
        history.clear()

        assert len(history) == 0
        assert history.latest is None

    def test_unsubscribe(self):
        history = ServiceHistory()
        seen = []
        unsubscribe = history.subscribe(seen.append)

        history.record(make_record("A"))
        unsubscribe()
        unsubscribe()
        history.record(make_record("B"))

        assert [r.service_name for r in seen] == ["A"]
