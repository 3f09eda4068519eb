"""Competitors API client."""

import logging
from typing import Any

from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class CompetitorsClient(BaseAPIClient):
    """Client for competitor profile and comparison endpoints."""

    async def get_profile(self, competitor_id: str) -> dict[str, Any]:
        """
        Get records, ranks and percentiles for one competitor.

        Raises:
            APIError: Invalid ID, unknown competitor or federation failure
        """
        logger.info(f"Requesting profile for {competitor_id}")
        return await self._get(f"/api/v1/competitors/{competitor_id}")

    async def compare(self, first_id: str, second_id: str) -> dict[str, Any]:
        """
        Compare two competitors.

        Raises:
            APIError: Either competitor could not be loaded
        """
        logger.info(f"Requesting comparison {first_id} vs {second_id}")
        return await self._get(
            "/api/v1/compare",
            params={"first": first_id, "second": second_id},
        )
