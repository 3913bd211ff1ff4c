# backend/utils/dependencies.py
# FastAPI dependency providers for the storefront state objects
import logging
from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from utils.api_client import ApiClient
from utils.api_resources import ShopAPI
from utils.auth_session import AuthSession
from utils.cart_store import CartStore
from utils.checkout import PricingPolicy
from utils.service_history import ServiceHistory
from utils.storage import SlotStorage, TokenStore

logger = logging.getLogger(__name__)

# Failed-call history lives for the whole process, never in storage
service_history = ServiceHistory()


def redirect_to_login(login_url: str) -> None:
    logger.info(f"Session expired, redirecting to {login_url}")


def get_storage(db: Session = Depends(get_db)) -> SlotStorage:
    return SlotStorage(db)


def get_token_store(storage: SlotStorage = Depends(get_storage)) -> TokenStore:
    return TokenStore(storage)


def get_cart(storage: SlotStorage = Depends(get_storage)) -> CartStore:
    return CartStore(storage)


def get_service_history() -> ServiceHistory:
    return service_history


def get_pricing_policy() -> PricingPolicy:
    return PricingPolicy()


async def get_api_client(
    token_store: TokenStore = Depends(get_token_store),
    history: ServiceHistory = Depends(get_service_history),
):
    async with ApiClient(token_store, history, on_unauthorized=redirect_to_login) as client:
        yield client


def get_shop_api(client: ApiClient = Depends(get_api_client)) -> ShopAPI:
    return ShopAPI(client)


def get_auth_session(
    shop: ShopAPI = Depends(get_shop_api),
    token_store: TokenStore = Depends(get_token_store),
) -> AuthSession:
    return AuthSession(shop.auth, token_store)
