"""
Ops Manager Client Implementation

Provides the async HTTP transport shared by the resource services.
"""

import asyncio
import functools
import logging
import os
from typing import Any, Dict, Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError

from .agents import AgentsService
from .exceptions import DecodeError, OpsManagerTimeoutError, TransportError
from .types import ErrorResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
API_PATH = "api/public/v1.0/"
USER_AGENT = "opsmngr-python/1.0.0"


class OpsManagerClient:
    """
    Ops Manager Client for interacting with the public API.

    Args:
        base_url: Base URL of the Ops Manager server. Falls back to the
            OPSMNGR_BASE_URL environment variable.
        timeout: Request timeout in seconds (default: 30)
        headers: Extra headers sent with every request
        session: Optional aiohttp session to use instead of creating one.
            An injected session is left open by close().
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        base_url = base_url or os.getenv("OPSMNGR_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session = session
        self._owns_session = session is None

        self.agents = AgentsService(self)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def connect(self):
        """Create the HTTP session if none was injected."""
        if self._session is None:
            headers = {"User-Agent": USER_AGENT}
            headers.update(self.headers)

            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=headers,
            )
            self._owns_session = True

    async def close(self):
        """Close the HTTP session if this client created it."""
        if self._session and self._owns_session:
            await self._session.close()
            self._session = None

    def build_url(self, path: str) -> str:
        """Resolve a resource path against the versioned API root."""
        return f"{self.base_url}/{API_PATH}{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> bytes:
        """
        Send a request and return the raw response body.

        Args:
            method: HTTP method
            path: Resource path relative to the API root
            json_data: Optional JSON body

        Returns:
            Response body bytes of a 2xx response

        Raises:
            TransportError: If the connection fails, the session is closed
                or the status is not 2xx
            OpsManagerTimeoutError: If request times out
        """
        if self._session is None:
            await self.connect()

        url = self.build_url(path)
        if self._session.closed:
            logger.error(f"{method} {url} failed: session is closed")
            raise TransportError("Connection error: session is closed")

        headers = {"Accept": "application/json"}
        if not self._owns_session:
            headers.update(self.headers)

        logger.debug(f"{method} {url}")

        try:
            async with self._session.request(
                method,
                url,
                json=json_data,
                headers=headers,
                timeout=self.timeout,
            ) as response:
                body = await response.read()
                logger.debug(f"{method} {url} returned {response.status}")

                if 200 <= response.status < 300:
                    return body
                raise self._build_error(response.status, body)
        except asyncio.TimeoutError as e:
            logger.error(f"{method} {url} timed out")
            raise OpsManagerTimeoutError("Request timeout") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Connection error: {str(e)}") from e

    def decode(self, body: bytes, model: Any) -> Any:
        """
        Decode a JSON body into the given type.

        Raises:
            DecodeError: If the body is not valid JSON or does not match the type
        """
        try:
            return _adapter(model).validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Failed to decode response: {e}") from e

    def _build_error(self, status: int, body: bytes) -> TransportError:
        """Map a non-2xx response onto a TransportError."""
        try:
            error = ErrorResponse.model_validate_json(body)
        except ValidationError:
            error = ErrorResponse()

        text = error.detail or body.decode("utf-8", errors="replace")
        message = f"HTTP {status}: {text}"
        logger.error(message)

        error_class = TransportError
        if status == 408 or status == 504:
            error_class = OpsManagerTimeoutError

        return error_class(
            message,
            status_code=status,
            body=body,
            error_code=error.error_code,
            detail=error.detail,
            reason=error.reason,
        )


@functools.lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)
