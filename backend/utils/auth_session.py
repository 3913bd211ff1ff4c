# backend/utils/auth_session.py
import httpx
import logging
from typing import Optional

from schemas.user import AuthResult
from utils.api_resources import AuthAPI
from utils.storage import TokenStore

logger = logging.getLogger(__name__)


def _error_message(error: httpx.HTTPError, default: str) -> str:
    # Prefer the backend's own message when the response carries one
    if isinstance(error, httpx.HTTPStatusError):
        try:
            body = error.response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
    return default


class AuthSession:
    """Logged-in user state on top of the token slot.

    Login and signup store the returned token; the API client picks it
    up from the same slot for every later request.
    """

    def __init__(self, auth_api: AuthAPI, token_store: TokenStore):
        self.auth_api = auth_api
        self.token_store = token_store
        self.user: Optional[dict] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.token_store.get() is not None

    async def verify(self) -> bool:
        # Called on start: keep the stored token only if the backend accepts it
        token = self.token_store.get()
        if not token:
            return False
        try:
            data = await self.auth_api.verify_token(token)
        except httpx.HTTPError as e:
            logger.info(f"Stored token could not be verified: {e}")
            self._drop_session()
            return False

        if data and data.get("valid"):
            self.user = data.get("user")
            return True
        self._drop_session()
        return False

    async def send_otp(self, phone_number: str) -> AuthResult:
        try:
            data = await self.auth_api.send_otp({"phoneNumber": phone_number})
        except httpx.HTTPError as e:
            message = _error_message(e, "Failed to send OTP")
            logger.warning(message)
            return AuthResult(success=False, error=message)
        logger.info("OTP sent successfully")
        return AuthResult(success=True, data=data)

    async def login(self, phone_number: str, otp: str) -> AuthResult:
        try:
            data = await self.auth_api.login({"phoneNumber": phone_number, "otp": otp})
        except httpx.HTTPError as e:
            message = _error_message(e, "Login failed")
            logger.warning(message)
            return AuthResult(success=False, error=message)
        if not self._start_session(data):
            logger.warning("Login response carried no token")
            return AuthResult(success=False, error="Login failed")
        logger.info("Login successful")
        return AuthResult(success=True)

    async def signup(self, user_data: dict) -> AuthResult:
        try:
            data = await self.auth_api.signup(user_data)
        except httpx.HTTPError as e:
            message = _error_message(e, "Signup failed")
            logger.warning(message)
            return AuthResult(success=False, error=message)
        if not self._start_session(data):
            logger.warning("Signup response carried no token")
            return AuthResult(success=False, error="Signup failed")
        logger.info("Account created successfully")
        return AuthResult(success=True)

    async def update_profile(self, user_data: dict) -> AuthResult:
        try:
            data = await self.auth_api.update_profile(user_data)
        except httpx.HTTPError as e:
            message = _error_message(e, "Update failed")
            logger.warning(message)
            return AuthResult(success=False, error=message)
        self.user = {**(self.user or {}), **((data or {}).get("user") or {})}
        return AuthResult(success=True, data=self.user)

    def logout(self) -> None:
        self._drop_session()
        logger.info("Logged out")

    def _start_session(self, data: Optional[dict]) -> bool:
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            return False
        self.token_store.set(token)
        self.user = data.get("user")
        return True

    def _drop_session(self) -> None:
        self.token_store.clear()
        self.user = None
