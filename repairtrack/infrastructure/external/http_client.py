"""
HTTP client utilities for external API calls.
"""

import time
from typing import Any, Dict, Optional, Tuple

import httpx

from repairtrack.config.logging import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """HTTP client for external API calls."""

    def __init__(
        self,
        timeout: float = 30.0,
        auth: Optional[Tuple[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.auth = auth
        self.transport = transport
        self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        self.client = httpx.AsyncClient(
            timeout=self.timeout, auth=self.auth, transport=self.transport
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.client:
            await self.client.aclose()

    async def post(
        self,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        form: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Make POST request with a JSON or form-encoded body."""
        return await self._request("POST", url, json=json, data=form, headers=headers)

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        start_time = time.time()

        try:
            response = await self.client.request(method, url, **kwargs)

            response_time = (time.time() - start_time) * 1000

            logger.debug(
                f"HTTP {method} request completed",
                url=url,
                status_code=response.status_code,
                response_time_ms=response_time,
            )

            return response

        except Exception as e:
            response_time = (time.time() - start_time) * 1000

            logger.error(
                f"HTTP {method} request failed",
                url=url,
                error=str(e),
                response_time_ms=response_time,
            )
            raise
