from decimal import Decimal
from pydantic import BaseModel
from typing import Optional

from schemas.cart import CamelModel


# Shipping option offered at checkout
class ShippingMethod(BaseModel):
    id: str
    name: str
    description: str
    price: Decimal
    free_over_threshold: bool = False


# Address the order ships to
class ShippingAddress(CamelModel):
    first_name: str
    last_name: str
    address: str
    apartment: Optional[str] = None
    city: str
    state: Optional[str] = None
    zip_code: str
    country: str
    phone: Optional[str] = None


# Price breakdown of the current cart
class CartSummary(CamelModel):
    item_count: int
    subtotal: Decimal
    shipping_method: str
    shipping: Decimal
    tax: Decimal
    total: Decimal
    free_shipping_remaining: Decimal


# Input schema for placing an order from the cart
class CheckoutRequest(CamelModel):
    shipping_address: ShippingAddress
    shipping_method: str = "standard"
