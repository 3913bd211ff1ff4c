# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./storefront_state.db"

    # Shop REST API consumed by the storefront
    API_BASE_URL: str = "http://localhost:8080/api/api"
    API_TIMEOUT_SECONDS: float = 10.0
    LOGIN_URL: str = "/login"

    # Names of the durable key-value slots
    CART_STORAGE_KEY: str = "cart"
    TOKEN_STORAGE_KEY: str = "token"

    # Number of failed backend calls kept for the service info dashboard
    SERVICE_HISTORY_LIMIT: int = 10

    # Checkout pricing policy
    FREE_SHIPPING_THRESHOLD: float = 50.0
    TAX_RATE: float = 0.08

    LOG_LEVEL: str = "INFO"
    FRONTEND_URL: str = "http://localhost:3000"

    class Config:
        env_file: ClassVar[str] = str(env_path)

settings = Settings()
