"""Pytest configuration and fixtures"""
import os

# Keep tests off the real slot database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base
import models.storage_slot  # noqa: F401
from schemas.cart import ProductSnapshot
from utils.api_client import ApiClient
from utils.cart_store import CartStore
from utils.service_history import ServiceHistory
from utils.storage import SlotStorage, TokenStore

BASE_URL = "http://shop.test/api"


@pytest.fixture
def db_session():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    yield db
    db.close()
    engine.dispose()


@pytest.fixture
def storage(db_session):
    return SlotStorage(db_session)


@pytest.fixture
def token_store(storage):
    return TokenStore(storage)


@pytest.fixture
def cart(storage):
    return CartStore(storage)


@pytest.fixture
def history():
    return ServiceHistory(limit=10)


@pytest.fixture
def tee():
    """Sample product as the catalog returns it"""
    return ProductSnapshot(id="P1", name="Classic Tee", price="19.99", images=["tee-front.jpg"], stock=5)


@pytest.fixture
def mug():
    return ProductSnapshot(id=42, name="Coffee Mug", price=7.5, image="mug.jpg")


@pytest.fixture
def make_client(token_store, history):
    """Build an ApiClient whose backend is the given request handler"""
    def _make(handler, on_unauthorized=None):
        return ApiClient(
            token_store,
            history,
            base_url=BASE_URL,
            on_unauthorized=on_unauthorized,
            transport=httpx.MockTransport(handler),
        )
    return _make
