"""Base API client with common HTTP logic."""
import logging
from typing import Any, Optional

import aiohttp

logger = logging.getLogger(__name__)


class APIError(Exception):
    """API error."""

    def __init__(self, status: int, detail: str):
        self.status = status
        self.detail = detail
        super().__init__(f"API error {status}: {detail}")


class BaseAPIClient:
    """Base class for API clients."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def _get(self, path: str, **kwargs) -> dict[str, Any]:
        """
        Make GET request.

        Raises:
            APIError: Non-200 response; detail is the backend's message
        """
        session = await self._get_session()
        url = f"{self.base_url}{path}"

        async with session.get(url, **kwargs) as resp:
            try:
                data = await resp.json()
            except (aiohttp.ContentTypeError, ValueError):
                raise APIError(resp.status, "Unexpected response from the backend")
            if resp.status != 200:
                detail = data.get("detail", "Unknown error") if isinstance(data, dict) else "Unknown error"
                if not isinstance(detail, str):
                    # FastAPI validation errors carry a list of problems
                    detail = "Invalid request"
                raise APIError(resp.status, detail)
            return data

    async def _get_optional(self, path: str, **kwargs) -> Optional[dict[str, Any]]:
        """Make GET request, return None on error."""
        try:
            return await self._get(path, **kwargs)
        except APIError:
            return None
        except aiohttp.ClientError as e:
            logger.error(f"Request failed: {e}")
            return None

    async def close(self):
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
