# backend/utils/checkout.py
import logging
from decimal import Decimal
from typing import Iterable, Optional

from config import settings
from schemas.order import CartSummary, ShippingAddress, ShippingMethod
from utils.api_resources import OrdersAPI
from utils.cart_store import CartStore
from utils.errors import EmptyCart, UnknownShippingMethod
from utils.money import format_money, round_money, to_decimal, to_float

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_METHODS = (
    ShippingMethod(id="standard", name="Standard Shipping", description="5-7 business days",
                   price=Decimal("9.99"), free_over_threshold=True),
    ShippingMethod(id="express", name="Express Shipping", description="2-3 business days",
                   price=Decimal("19.99")),
    ShippingMethod(id="overnight", name="Overnight Shipping", description="Next business day",
                   price=Decimal("39.99")),
)


class PricingPolicy:
    """Shipping and tax rules applied on top of the cart subtotal."""

    def __init__(
        self,
        free_shipping_threshold=settings.FREE_SHIPPING_THRESHOLD,
        tax_rate=settings.TAX_RATE,
        shipping_methods: Iterable[ShippingMethod] = DEFAULT_SHIPPING_METHODS,
    ):
        self.free_shipping_threshold = to_decimal(free_shipping_threshold)
        self.tax_rate = to_decimal(tax_rate)
        self.shipping_methods = {m.id: m for m in shipping_methods}

    def shipping_for(self, subtotal: Decimal, method_id: str) -> Decimal:
        method = self.shipping_methods.get(method_id)
        if method is None:
            raise UnknownShippingMethod(method_id)
        if method.free_over_threshold and subtotal >= self.free_shipping_threshold:
            return round_money(0)
        return round_money(method.price)

    def summarize(self, cart: CartStore, method_id: str = "standard") -> CartSummary:
        subtotal = cart.get_total()
        shipping = self.shipping_for(subtotal, method_id)
        if not len(cart):
            # Nothing to ship
            shipping = round_money(0)
        tax = round_money(subtotal * self.tax_rate)
        return CartSummary(
            item_count=cart.get_item_count(),
            subtotal=subtotal,
            shipping_method=method_id,
            shipping=shipping,
            tax=tax,
            total=round_money(subtotal + shipping + tax),
            free_shipping_remaining=round_money(max(self.free_shipping_threshold - subtotal, Decimal("0"))),
        )


def build_order_payload(cart: CartStore, summary: CartSummary, shipping_address: ShippingAddress) -> dict:
    return {
        "items": [
            {
                "product": line.product_id,
                "quantity": line.quantity,
                "price": to_float(line.unit_price),
                "selectedSize": line.size,
                "selectedColor": line.color,
            }
            for line in cart.lines
        ],
        "shippingAddress": shipping_address.model_dump(by_alias=True),
        "shippingMethod": summary.shipping_method,
        "subtotal": to_float(summary.subtotal),
        "shipping": to_float(summary.shipping),
        "tax": to_float(summary.tax),
        "total": to_float(summary.total),
    }


async def submit_order(
    cart: CartStore,
    orders_api: OrdersAPI,
    shipping_address: ShippingAddress,
    method_id: str = "standard",
    policy: Optional[PricingPolicy] = None,
):
    """Place an order for the current cart.

    The cart is cleared only once the backend accepted the order; a
    failure propagates and leaves the cart untouched.
    """
    if not len(cart):
        raise EmptyCart()

    policy = policy or PricingPolicy()
    summary = policy.summarize(cart, method_id)
    order = await orders_api.create(build_order_payload(cart, summary, shipping_address))

    cart.clear()
    logger.info(f"Order placed successfully, total {format_money(summary.total)}")
    return order
