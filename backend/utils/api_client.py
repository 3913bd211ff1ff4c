# backend/utils/api_client.py
import httpx
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from config import settings
from schemas.service_info import ServiceCallRecord
from utils.service_catalog import classify
from utils.service_history import ServiceHistory
from utils.storage import TokenStore

logger = logging.getLogger(__name__)


class ApiClient:
    """Single-shot client for the shop REST API.

    Adds the bearer token to every request and, on any failure, records
    which backend service failed before re-raising the original error.
    No retries, no back-off, no queueing.
    """

    def __init__(
        self,
        token_store: TokenStore,
        history: ServiceHistory,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.API_TIMEOUT_SECONDS,
        on_unauthorized: Optional[Callable[[str], None]] = None,
        login_url: str = settings.LOGIN_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token_store = token_store
        self.history = history
        self.base_url = base_url.rstrip("/")
        self.on_unauthorized = on_unauthorized
        self.login_url = login_url
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            event_hooks={"request": [self._attach_token]},
            transport=transport,
        )

    async def _attach_token(self, request: httpx.Request) -> None:
        # An explicit Authorization header from the caller wins
        if "Authorization" in request.headers:
            return
        token = self.token_store.get()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def request(
        self,
        method: str,
        path: str,
        json=None,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=json, params=params, headers=headers)
            response.raise_for_status()
            return response
        except httpx.HTTPError as e:
            self._report_failure(method, path, e)
            raise

    def _report_failure(self, method: str, path: str, error: httpx.HTTPError) -> None:
        status_code = error.response.status_code if isinstance(error, httpx.HTTPStatusError) else None
        service = classify(path)
        entry = ServiceCallRecord(
            service_name=service.name,
            description=service.description,
            endpoint=f"{self.base_url}{path}",
            method=method.upper(),
            status_code=status_code,
            timestamp=datetime.now(timezone.utc),
            connection_steps=list(service.connection_steps),
            original_error=str(error),
        )
        logger.warning(
            f"Service connection info: {entry.service_name} failed on "
            f"{entry.method} {entry.endpoint}: {entry.original_error}"
        )
        self.history.record(entry)

        if status_code == 401:
            # Session is gone: drop the token and send the user to login
            try:
                self.token_store.clear()
                if self.on_unauthorized:
                    self.on_unauthorized(self.login_url)
            except Exception:
                logger.exception("Could not end the expired session")

    async def get(self, path: str, params: Optional[dict] = None, headers: Optional[dict] = None) -> httpx.Response:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(self, path: str, json=None, headers: Optional[dict] = None) -> httpx.Response:
        return await self.request("POST", path, json=json, headers=headers)

    async def put(self, path: str, json=None) -> httpx.Response:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json=None) -> httpx.Response:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
