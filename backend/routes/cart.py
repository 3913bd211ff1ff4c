# backend/routes/cart.py
from fastapi import APIRouter, Depends, HTTPException, status

from schemas.cart import CartAddItem, CartLine, CartOut, CartUpdateItem
from schemas.order import CartSummary
from utils.cart_store import CartStore
from utils.checkout import PricingPolicy
from utils.dependencies import get_cart, get_pricing_policy
from utils.errors import InvalidQuantity, UnknownShippingMethod

router = APIRouter(prefix="/cart", tags=["Cart"])

def _cart_to_out(cart: CartStore) -> CartOut:
    return CartOut(items=cart.lines, item_count=cart.get_item_count(), total=cart.get_total())

@router.get("", response_model=CartOut)
def get_cart_contents(cart: CartStore = Depends(get_cart)):
    return _cart_to_out(cart)

@router.post("/items", response_model=CartLine, status_code=status.HTTP_200_OK)
def add_to_cart(payload: CartAddItem, cart: CartStore = Depends(get_cart)):
    try:
        return cart.add_item(payload.product, payload.quantity, payload.size, payload.color)
    except InvalidQuantity as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.put("/items/{line_id}", response_model=CartOut)
def update_cart_item(line_id: str, payload: CartUpdateItem, cart: CartStore = Depends(get_cart)):
    # Unknown line ids are ignored; a quantity of 0 or less removes the line
    cart.update_quantity(line_id, payload.quantity)
    return _cart_to_out(cart)

@router.delete("/items/{line_id}", response_model=CartOut)
def delete_cart_item(line_id: str, cart: CartStore = Depends(get_cart)):
    cart.remove_item(line_id)
    return _cart_to_out(cart)

@router.delete("", response_model=CartOut)
def clear_cart(cart: CartStore = Depends(get_cart)):
    cart.clear()
    return _cart_to_out(cart)

@router.get("/summary", response_model=CartSummary)
def get_cart_summary(
    shipping_method: str = "standard",
    cart: CartStore = Depends(get_cart),
    policy: PricingPolicy = Depends(get_pricing_policy),
):
    try:
        return policy.summarize(cart, shipping_method)
    except UnknownShippingMethod as e:
        raise HTTPException(status_code=400, detail=str(e))
