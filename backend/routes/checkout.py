# backend/routes/checkout.py
import httpx
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from config import settings
from schemas.order import CheckoutRequest
from utils.api_resources import ShopAPI
from utils.cart_store import CartStore
from utils.checkout import PricingPolicy, submit_order
from utils.dependencies import get_cart, get_pricing_policy, get_service_history, get_shop_api
from utils.errors import EmptyCart, UnknownShippingMethod
from utils.service_history import ServiceHistory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["Checkout"])

@router.post("", status_code=status.HTTP_201_CREATED)
async def place_order(
    payload: CheckoutRequest,
    cart: CartStore = Depends(get_cart),
    shop: ShopAPI = Depends(get_shop_api),
    policy: PricingPolicy = Depends(get_pricing_policy),
    history: ServiceHistory = Depends(get_service_history),
):
    try:
        order = await submit_order(cart, shop.orders, payload.shipping_address, payload.shipping_method, policy)
    except (EmptyCart, UnknownShippingMethod) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 401:
            raise HTTPException(
                status_code=401,
                detail="Session expired, please log in again",
                headers={"Location": settings.LOGIN_URL},
            )
        raise _backend_failure(history, e)
    except httpx.RequestError as e:
        raise _backend_failure(history, e)

    return {"order": order}

def _backend_failure(history: ServiceHistory, error: httpx.HTTPError) -> HTTPException:
    # The API client already classified the failure; hand its record to the UI
    logger.error(f"Order submission failed: {error}")
    record = history.latest
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={
            "message": "Order could not be placed",
            "service": record.model_dump(mode="json") if record else None,
        },
    )
