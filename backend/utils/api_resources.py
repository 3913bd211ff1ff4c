# backend/utils/api_resources.py
# Endpoint groups of the shop REST API. Each call goes through ApiClient,
# so failures are classified and re-raised there; these return decoded JSON.
import httpx
from typing import Optional

from utils.api_client import ApiClient


def _json(response: httpx.Response):
    # DELETE and some POST endpoints answer with an empty body
    return response.json() if response.content else None


class _Resource:
    def __init__(self, client: ApiClient):
        self.client = client

    async def _get(self, path: str, params: Optional[dict] = None, headers: Optional[dict] = None):
        return _json(await self.client.get(path, params=params, headers=headers))

    async def _post(self, path: str, data=None):
        return _json(await self.client.post(path, json=data))

    async def _put(self, path: str, data=None):
        return _json(await self.client.put(path, json=data))

    async def _patch(self, path: str, data=None):
        return _json(await self.client.patch(path, json=data))

    async def _delete(self, path: str):
        return _json(await self.client.delete(path))


class AuthAPI(_Resource):
    async def send_otp(self, data: dict):
        return await self._post("/users/otp", data)

    async def login(self, data: dict):
        return await self._post("/auth/login", data)

    async def signup(self, data: dict):
        return await self._post("/users/register", data)

    async def verify_token(self, token: str):
        return await self._get("/auth/verify", headers={"Authorization": f"Bearer {token}"})

    async def update_profile(self, data: dict):
        return await self._put("/auth/profile", data)

    async def change_password(self, data: dict):
        return await self._put("/auth/change-password", data)


class ProductsAPI(_Resource):
    async def get_all(self, params: Optional[dict] = None):
        return await self._get("/products", params=params)

    async def get_by_id(self, product_id):
        return await self._get(f"/products/{product_id}")

    async def get_by_category(self, category: str, params: Optional[dict] = None):
        return await self._get(f"/products/category/{category}", params=params)

    async def get_featured(self):
        return await self._get("/products/featured")

    async def get_best_sellers(self):
        return await self._get("/products/best-sellers")

    async def get_new_arrivals(self):
        return await self._get("/products/new-arrivals")

    async def search(self, query: str, params: Optional[dict] = None):
        return await self._get("/products/search", params={"q": query, **(params or {})})

    async def get_categories(self):
        return await self._get("/products/categories")

    async def get_filters(self):
        return await self._get("/products/filters")

    # Admin endpoints
    async def create(self, data: dict):
        return await self._post("/products", data)

    async def update(self, product_id, data: dict):
        return await self._put(f"/products/{product_id}", data)

    async def delete(self, product_id):
        return await self._delete(f"/products/{product_id}")

    async def update_stock(self, product_id, stock: int):
        return await self._patch(f"/products/{product_id}/stock", {"stock": stock})


class OrdersAPI(_Resource):
    async def create(self, data: dict):
        return await self._post("/orders", data)

    async def get_by_id(self, order_id):
        return await self._get(f"/orders/{order_id}")

    async def get_user_orders(self, user_id):
        return await self._get(f"/orders/user/{user_id}")

    async def track_order(self, order_id):
        return await self._get(f"/orders/{order_id}/track")

    # Admin endpoints
    async def get_all(self, params: Optional[dict] = None):
        return await self._get("/orders", params=params)

    async def update_status(self, order_id, status: str):
        return await self._patch(f"/orders/{order_id}/status", {"status": status})

    async def get_order_stats(self):
        return await self._get("/orders/stats")


# Server-side cart, for backends that keep one
class CartAPI(_Resource):
    async def get(self):
        return await self._get("/cart")

    async def add(self, data: dict):
        return await self._post("/cart/items", data)

    async def update(self, item_id, data: dict):
        return await self._put(f"/cart/items/{item_id}", data)

    async def remove(self, item_id):
        return await self._delete(f"/cart/items/{item_id}")

    async def clear(self):
        return await self._delete("/cart")


class PaymentAPI(_Resource):
    async def create_payment_intent(self, data: dict):
        return await self._post("/payments/create-intent", data)

    async def confirm_payment(self, data: dict):
        return await self._post("/payments/confirm", data)

    async def get_payment_methods(self):
        return await self._get("/payments/methods")

    async def refund(self, payment_id, amount):
        return await self._post(f"/payments/{payment_id}/refund", {"amount": amount})


class UsersAPI(_Resource):
    async def get_all(self, params: Optional[dict] = None):
        return await self._get("/users", params=params)

    async def get_by_id(self, user_id):
        return await self._get(f"/users/{user_id}")

    async def update(self, user_id, data: dict):
        return await self._put(f"/users/{user_id}", data)

    async def delete(self, user_id):
        return await self._delete(f"/users/{user_id}")

    async def get_user_stats(self):
        return await self._get("/users/stats")


class InventoryAPI(_Resource):
    async def get_all(self, params: Optional[dict] = None):
        return await self._get("/inventory", params=params)

    async def get_by_id(self, item_id):
        return await self._get(f"/inventory/{item_id}")

    async def update(self, item_id, data: dict):
        return await self._put(f"/inventory/{item_id}", data)

    async def get_low_stock(self):
        return await self._get("/inventory/low-stock")

    async def get_stock_alerts(self):
        return await self._get("/inventory/alerts")


class EmailAPI(_Resource):
    async def send_order_confirmation(self, order_id):
        return await self._post(f"/emails/order-confirmation/{order_id}")

    async def send_payment_confirmation(self, payment_id):
        return await self._post(f"/emails/payment-confirmation/{payment_id}")

    async def send_shipping_notification(self, order_id):
        return await self._post(f"/emails/shipping-notification/{order_id}")

    async def send_custom_email(self, data: dict):
        return await self._post("/emails/custom", data)

    async def get_email_templates(self):
        return await self._get("/emails/templates")

    async def update_email_template(self, template_id, data: dict):
        return await self._put(f"/emails/templates/{template_id}", data)


class AnalyticsAPI(_Resource):
    async def get_dashboard_stats(self):
        return await self._get("/analytics/dashboard")

    async def get_sales_data(self, period: str):
        return await self._get(f"/analytics/sales/{period}")

    async def get_top_products(self, limit: int = 10):
        return await self._get("/analytics/top-products", params={"limit": limit})

    async def get_customer_insights(self):
        return await self._get("/analytics/customers")

    async def get_revenue_data(self, period: str):
        return await self._get(f"/analytics/revenue/{period}")


class WishlistAPI(_Resource):
    async def get(self):
        return await self._get("/wishlist")

    async def add(self, product_id):
        return await self._post("/wishlist", {"productId": product_id})

    async def remove(self, product_id):
        return await self._delete(f"/wishlist/{product_id}")

    async def clear(self):
        return await self._delete("/wishlist")


class ReviewsAPI(_Resource):
    async def get_by_product(self, product_id):
        return await self._get(f"/reviews/product/{product_id}")

    async def create(self, data: dict):
        return await self._post("/reviews", data)

    async def update(self, review_id, data: dict):
        return await self._put(f"/reviews/{review_id}", data)

    async def delete(self, review_id):
        return await self._delete(f"/reviews/{review_id}")

    async def get_all(self, params: Optional[dict] = None):
        return await self._get("/reviews", params=params)


class CouponsAPI(_Resource):
    async def validate(self, code: str):
        return await self._post("/coupons/validate", {"code": code})

    async def apply(self, code: str, order_data: dict):
        return await self._post("/coupons/apply", {"code": code, **order_data})

    # Admin endpoints
    async def get_all(self, params: Optional[dict] = None):
        return await self._get("/coupons", params=params)

    async def create(self, data: dict):
        return await self._post("/coupons", data)

    async def update(self, coupon_id, data: dict):
        return await self._put(f"/coupons/{coupon_id}", data)

    async def delete(self, coupon_id):
        return await self._delete(f"/coupons/{coupon_id}")


class ShopAPI:
    """All endpoint groups over one ApiClient."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthAPI(client)
        self.products = ProductsAPI(client)
        self.orders = OrdersAPI(client)
        self.cart = CartAPI(client)
        self.payments = PaymentAPI(client)
        self.users = UsersAPI(client)
        self.inventory = InventoryAPI(client)
        self.emails = EmailAPI(client)
        self.analytics = AnalyticsAPI(client)
        self.wishlist = WishlistAPI(client)
        self.reviews = ReviewsAPI(client)
        self.coupons = CouponsAPI(client)
