"""
HTTP request gateway for the HR service API.

Every domain call goes through APIGateway.request, which:
- prefixes the endpoint with the configured API root
- sends JSON with a bearer token when one is stored
- returns the parsed JSON body on success
- raises RequestError / TransportError otherwise
"""

from typing import Any, Mapping, Optional

import httpx
from pydantic import BaseModel

from payroll_client.core.config import settings
from payroll_client.core.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    RequestError,
    TransportError,
)
from payroll_client.core.logging import get_logger
from payroll_client.core.token_store import TokenStore

logger = get_logger(__name__)


def encode_body(body: Any) -> Any:
    """Turn a request body into JSON-ready data."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


def error_message(payload: Any) -> str:
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return DEFAULT_ERROR_MESSAGE


class APIGateway:
    """Single point performing network I/O and JSON (de)serialization."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = settings.REQUEST_TIMEOUT,
    ):
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.token_store = token_store if token_store is not None else TokenStore()
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "APIGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def get_auth_headers(self) -> dict[str, str]:
        token = await self.token_store.get_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def build_headers(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> httpx.Headers:
        """Default headers with caller overrides applied case-insensitively."""
        merged = httpx.Headers({"Content-Type": "application/json"})
        merged.update(await self.get_auth_headers())
        if headers:
            merged.update(headers)
        return merged

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Any:
        """
        Perform one request against the API root.

        Args:
            endpoint: Path appended to the API root, e.g. "/employees/1"
            method: HTTP verb
            headers: Extra headers; these override the defaults
            body: JSON body (pydantic model, dict or list)

        Returns:
            Parsed JSON response body
        """
        url = f"{self.base_url}{endpoint}"
        method = method.upper()
        request_headers = await self.build_headers(headers)
        json_body = encode_body(body) if body is not None else None

        try:
            response = await self.http_client.request(
                method, url, headers=request_headers, json=json_body
            )
        except httpx.HTTPError as e:
            logger.error(f"API request failed: {method} {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"API request failed: {method} {url}: invalid JSON: {e}")
                raise TransportError(f"{method} {url} returned invalid JSON") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        error = RequestError(error_message(payload), response.status_code, payload)
        logger.error(
            f"API request failed: {method} {url}: {response.status_code} {error.message}"
        )
        raise error
