"""
Base async HTTP client.

Wraps httpx.AsyncClient with timeouts, orjson bodies and typed transport
errors. Status interpretation is left to the caller.
"""

import logging
import time
from typing import Any, Optional

import httpx
import orjson

from ..config import ParadexSettings
from ..exceptions import TransportError

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Thin async HTTP client bound to one base URL.

    No retries: the caller owns retry policy.
    """

    def __init__(
        self,
        base_url: str,
        settings: Optional[ParadexSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize base API client.

        Args:
            base_url: API base URL (path prefix preserved, e.g. .../v1)
            settings: Client settings (defaults used if None)
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.settings = settings or ParadexSettings()

        timeout = httpx.Timeout(
            self.settings.request_timeout,
            connect=self.settings.connect_timeout
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        self._request_counter = 0

    async def post(
        self,
        path: str,
        headers: Optional[dict[str, str]] = None,
        json_data: Optional[Any] = None
    ) -> httpx.Response:
        """
        Make POST request.

        Args:
            path: Request path relative to base_url
            headers: Request headers
            json_data: JSON body (serialized with orjson)

        Returns:
            Response of any status

        Raises:
            TransportError: On network failure or timeout
        """
        self._request_counter += 1
        request_id = f"POST:{path}:{self._request_counter}"

        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        content = orjson.dumps(json_data) if json_data is not None else None

        if self.settings.log_requests:
            logger.debug(f"[{request_id}] POST {self.base_url}{path}")

        start = time.time()
        try:
            response = await self._client.post(path, headers=request_headers, content=content)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: POST {self.base_url}{path}")
            raise TransportError(f"Request timeout: {type(e).__name__}") from e
        except httpx.HTTPError as e:
            logger.error(f"Connection error: POST {self.base_url}{path}: {type(e).__name__}")
            raise TransportError(f"Connection error: {e}") from e

        if self.settings.log_requests:
            logger.debug(
                f"[{request_id}] {response.status_code} in {(time.time() - start) * 1000:.1f}ms"
            )
        return response

    @staticmethod
    def parse_json(response: httpx.Response) -> Any:
        """
        Parse response body with orjson.

        Raises:
            orjson.JSONDecodeError: If the body is not JSON
        """
        return orjson.loads(response.content)

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
        logger.info("API client session closed")

    async def __aenter__(self) -> "BaseAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
