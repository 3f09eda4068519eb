"""
Federation API client.

Read-only access to two public JSON APIs:
- static API (person files, leaderboard totals)
- live API (person lookup, used for the avatar)

Failure policy:
- person file: fatal, raises
- avatar lookup: logged, returns None
- leaderboard total: logged, returns 0 (region shown as unranked)
"""

import asyncio
import logging
from typing import Optional

import httpx

from cubify.config import settings
from cubify.shared.constants import Discipline

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class FederationError(Exception):
    """Base federation API error."""
    pass


class FederationAPIError(FederationError):
    """Federation API returned an error or could not be reached."""
    pass


class CompetitorNotFound(FederationError):
    """No person file for the requested ID."""
    pass


# =============================================================================
# Client
# =============================================================================

class FederationClient:
    """
    Async client for the federation APIs.

    Usage:
        client = FederationClient()
        person = await client.get_person("2012PARK03")
        total = await client.get_leaderboard_total("world", Discipline.SINGLE, "333")
        await client.close()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        live_api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_concurrent_requests: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.federation_api_url).rstrip("/")
        self.live_api_url = (live_api_url or settings.wca_api_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout
        self._semaphore = asyncio.Semaphore(
            max_concurrent_requests or settings.max_concurrent_requests
        )
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def _get(self, url: str) -> httpx.Response:
        async with self._semaphore:
            return await self._get_client().get(url)

    async def close(self):
        """Close the underlying client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    # -------------------------------------------------------------------------
    # Person file (fatal on failure)
    # -------------------------------------------------------------------------

    async def get_person(self, competitor_id: str) -> dict:
        """
        Get the raw person file.

        Raises:
            CompetitorNotFound: No such competitor
            FederationAPIError: Any other failure
        """
        url = f"{self.base_url}/persons/{competitor_id}.json"

        try:
            response = await self._get(url)
        except httpx.HTTPError as e:
            logger.error(f"Person request failed for {competitor_id}: {e!r}")
            raise FederationAPIError(f"Federation API unreachable: {e}") from e

        if response.status_code == 404:
            raise CompetitorNotFound(
                f"Competitor {competitor_id} not found. Please check the WCA ID."
            )
        if response.status_code != 200:
            raise FederationAPIError(
                f"Federation API error: {response.status_code} for {competitor_id}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise FederationAPIError(f"Invalid JSON for {competitor_id}") from e

    # -------------------------------------------------------------------------
    # Optional lookups (never raise)
    # -------------------------------------------------------------------------

    async def get_avatar_lookup(self, competitor_id: str) -> Optional[dict]:
        """Get the live person lookup carrying the avatar, None on any failure."""
        url = f"{self.live_api_url}/persons/{competitor_id}"

        try:
            response = await self._get(url)
            if response.status_code != 200:
                logger.info(f"Avatar lookup for {competitor_id}: HTTP {response.status_code}")
                return None
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Avatar fetch failed for {competitor_id}: {e!r}")
            return None

    async def get_leaderboard_total(
        self,
        scope: str,
        discipline: Discipline,
        event_id: str,
    ) -> int:
        """
        Get the number of competitors on a leaderboard.

        Args:
            scope: "world", a continent code ("europe") or a country code ("US")
            discipline: single or average
            event_id: Event code ("333")

        Returns:
            Leaderboard size, 0 if it could not be fetched
        """
        url = f"{self.base_url}/rank/{scope}/{discipline.value}/{event_id}.json"

        try:
            response = await self._get(url)
            if response.status_code != 200:
                logger.warning(
                    f"Leaderboard {scope}/{discipline.value}/{event_id}: "
                    f"HTTP {response.status_code}"
                )
                return 0
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Leaderboard {scope}/{discipline.value}/{event_id} failed: {e!r}")
            return 0

        total = data.get("total") if isinstance(data, dict) else None
        if not isinstance(total, int) or total < 0:
            return 0
        return total
