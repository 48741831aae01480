"""
Dribl API Client.

Async HTTP client for the Dribl fixtures API, with a synchronous wrapper
for the CLI. Requests are never retried: a failed sync is simply run again.
"""

import asyncio
import logging
from typing import Any

import httpx

from ..config import DriblSettings
from .endpoints import get_fixtures_params, get_fixtures_url

logger = logging.getLogger(__name__)


class DriblAPIError(Exception):
    """Base exception for Dribl API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class DriblNotFoundError(DriblAPIError):
    """Raised when resource not found."""

    pass


class DriblRateLimitError(DriblAPIError):
    """Raised when rate limited by the API."""

    pass


class DriblResponseError(DriblAPIError):
    """Raised when the response body is not the expected JSON shape."""

    pass


class DriblClient:
    """
    Async client for the Dribl API.

    Handles HTTP requests, timeouts, and maps failures onto DriblAPIError.
    """

    def __init__(
        self,
        settings: DriblSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Dribl client.

        Args:
            settings: Dribl identifiers and timeout (defaults from environment)
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = settings or DriblSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "DriblClient":
        """Async context manager entry."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _ensure_client(self) -> None:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.timeout),
                follow_redirects=True,
                transport=self._transport,
                headers={
                    "User-Agent": "Ground-Setup/1.0",
                    "Accept": "application/json",
                },
            )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str, **kwargs: Any) -> Any:
        """
        Make a GET request and decode the JSON body.

        Raises:
            DriblAPIError: On any transport failure or non-200 response
        """
        await self._ensure_client()
        assert self._client is not None

        logger.debug(f"GET {url} {kwargs.get('params', '')}")

        try:
            response = await self._client.get(url, **kwargs)
        except httpx.TimeoutException as e:
            raise DriblAPIError(f"Request timed out: {url}") from e
        except httpx.RequestError as e:
            raise DriblAPIError(f"Request failed: {e}") from e

        if response.status_code == 404:
            raise DriblNotFoundError(f"Resource not found: {url}", status_code=404)
        if response.status_code == 429:
            raise DriblRateLimitError("Rate limited by Dribl API", status_code=429)
        if response.status_code != 200:
            raise DriblAPIError(
                f"Unexpected status code: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise DriblResponseError(
                f"Invalid JSON from {url}: {e}", status_code=response.status_code
            ) from e

    # =========================================================================
    # Public API Methods
    # =========================================================================

    async def get_fixtures_page(self, cursor: str | None = None) -> dict[str, Any]:
        """
        Get one page of club fixtures.

        Args:
            cursor: Continuation cursor from the previous page's meta.next_cursor

        Returns:
            Decoded page with 'data' and 'meta' keys
        """
        params = get_fixtures_params(
            season=self.settings.season,
            competition=self.settings.competition,
            club=self.settings.club,
            tenant=self.settings.tenant,
            cursor=cursor,
        )
        data = await self.get(get_fixtures_url(self.settings.base_url), params=params)
        self._validate_fixtures_page(data)
        return data

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_fixtures_page(self, data: Any) -> None:
        """Validate fixtures page structure."""
        if not isinstance(data, dict):
            raise DriblResponseError("Invalid fixtures response: expected object")

        fixtures = data.get("data")
        if fixtures is not None and not isinstance(fixtures, list):
            raise DriblResponseError("Invalid fixtures response: 'data' is not a list")

        meta = data.get("meta")
        if meta is not None and not isinstance(meta, dict):
            raise DriblResponseError("Invalid fixtures response: 'meta' is not an object")


# =============================================================================
# Synchronous Wrapper
# =============================================================================


class SyncDriblClient:
    """
    Synchronous wrapper for DriblClient.

    Provides a synchronous interface by running the async client
    in an event loop. Used by the CLI and the sync pipeline.
    """

    def __init__(self, **kwargs: Any):
        """Initialize with same args as DriblClient."""
        self._async_client = DriblClient(**kwargs)
        self._loop: asyncio.AbstractEventLoop | None = None

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        """Get or create event loop."""
        if self._loop is None:
            self._loop = asyncio.new_event_loop()
        return self._loop

    def _run(self, coro):
        """Run a coroutine synchronously."""
        return self._get_loop().run_until_complete(coro)

    def __enter__(self) -> "SyncDriblClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the client."""
        if self._loop is not None:
            self._loop.run_until_complete(self._async_client.close())
            self._loop.close()
            self._loop = None

    def get_fixtures_page(self, cursor: str | None = None) -> dict[str, Any]:
        """Get one page of club fixtures."""
        return self._run(self._async_client.get_fixtures_page(cursor))
