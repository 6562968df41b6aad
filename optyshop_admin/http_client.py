# optyshop_admin/http_client.py
"""
Async HTTP client for the admin REST API.

Every call resolves to an ``ApiResponse(data, status)`` or raises ``ApiError``.
A transport failure (no response at all) is an ``ApiError`` with ``status=None``.
"""
import asyncio
import logging
import os
from typing import Any, Callable, Optional

import httpx

from optyshop_admin.schemas import ApiResponse

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("OPTYSHOP_API_URL", "https://optyshop-frontend.hmstech.org/api")
API_TIMEOUT = float(os.getenv("OPTYSHOP_API_TIMEOUT", "10"))
API_ATTEMPTS = int(os.getenv("OPTYSHOP_API_ATTEMPTS", "1"))

# gateway errors worth another attempt; 429 fails immediately
RETRY_STATUSES = (502, 503, 504)


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None, response_body: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response_body = response_body

    @property
    def is_network_error(self) -> bool:
        return self.status is None

    @property
    def is_server_error(self) -> bool:
        return self.status is not None and self.status >= 500

    @property
    def body_message(self) -> str:
        if isinstance(self.response_body, dict):
            msg = self.response_body.get("message") or self.response_body.get("detail")
            if isinstance(msg, str):
                return msg
        return ""

    @property
    def is_slug_conflict(self) -> bool:
        return self.status == 400 and "already exists" in self.body_message.lower()

    def __repr__(self):
        return f"ApiError(status={self.status!r}, message={self.message!r})"


def _parse_body(r: httpx.Response) -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text


class ApiClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        on_unauthorized: Optional[Callable[[str], None]] = None,
        timeout: float = API_TIMEOUT,
        attempts: int = API_ATTEMPTS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.on_unauthorized = on_unauthorized
        self.timeout = timeout
        self.attempts = max(1, attempts)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    def _headers(self) -> dict:
        token = self.token_provider() if self.token_provider else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _send_with_retries(self, method: str, url: str, *, params=None, json=None) -> httpx.Response:
        last_exc = None
        for i in range(1, self.attempts + 1):
            try:
                r = await self._client.request(method, url, params=params, json=json, headers=self._headers())
                if r.status_code in RETRY_STATUSES and i < self.attempts:
                    await asyncio.sleep(0.6 * i)
                    continue
                return r
            except (httpx.TimeoutException, httpx.ConnectError) as e:
                last_exc = e
                if i < self.attempts:
                    await asyncio.sleep(0.6 * i)
            except httpx.TransportError as e:
                last_exc = e
                break
        logger.warning("Network error - API server may be unavailable: %s", last_exc)
        raise ApiError(f"Network error: {last_exc}") from last_exc

    async def request(self, method: str, url: str, *, params=None, json=None) -> ApiResponse:
        r = await self._send_with_retries(method, url, params=params, json=json)
        body = _parse_body(r)
        if r.is_success:
            return ApiResponse(data=body, status=r.status_code)

        err = ApiError(f"{method} {url} failed with HTTP {r.status_code}", status=r.status_code, response_body=body)
        if r.status_code == 401:
            if self.on_unauthorized:
                self.on_unauthorized(url)
        elif r.status_code != 429:
            logger.debug("%s %s -> %s %s", method, url, r.status_code, err.body_message)
        raise err

    async def get(self, url: str, params: Optional[dict] = None) -> ApiResponse:
        return await self.request("GET", url, params=params)

    async def post(self, url: str, body: Any = None) -> ApiResponse:
        return await self.request("POST", url, json=body)

    async def put(self, url: str, body: Any = None) -> ApiResponse:
        return await self.request("PUT", url, json=body)

    async def delete(self, url: str) -> ApiResponse:
        return await self.request("DELETE", url)
