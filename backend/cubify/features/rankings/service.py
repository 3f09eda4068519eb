"""
RankingsService: competitor profiles and head-to-head comparisons.

Orchestrates the federation client (concurrent fetches) and the pure
normalizer / standings / comparison functions.
"""

from __future__ import annotations

import asyncio
import logging
import re

from cubify.features.federation import FederationClient
from .comparison import compare_points
from .models import CompetitorProfile, CompetitorRecord, HeadToHead, LeaderboardKey
from .normalizer import RankingsError, normalize
from .standings import build_event_standings, leaderboard_keys

logger = logging.getLogger(__name__)


# WCA ID: year of first competition, four letters of the name, counter
COMPETITOR_ID_PATTERN = re.compile(r"^\d{4}[A-Z]{4}\d{2}$")


class InvalidCompetitorId(RankingsError):
    """Identifier is empty or not shaped like a WCA ID."""
    pass


def normalize_competitor_id(value: str) -> str:
    """
    Clean up a user-entered WCA ID.

    "  2012park03 " -> "2012PARK03"

    Raises:
        InvalidCompetitorId: Empty or malformed
    """
    competitor_id = (value or "").strip().upper()
    if not competitor_id:
        raise InvalidCompetitorId("Please enter a WCA ID")
    if not COMPETITOR_ID_PATTERN.match(competitor_id):
        raise InvalidCompetitorId(
            f"'{competitor_id}' is not a valid WCA ID (expected e.g. 2012PARK03)"
        )
    return competitor_id


class RankingsService:
    """Builds competitor profiles and comparisons from federation data."""

    def __init__(self, client: FederationClient):
        self.client = client

    async def fetch_competitor(self, competitor_id: str) -> CompetitorRecord:
        """
        Fetch and normalize one competitor.

        The person file and the avatar lookup are fetched concurrently;
        only the person file can fail the call.
        """
        competitor_id = normalize_competitor_id(competitor_id)

        raw_person, raw_avatar = await asyncio.gather(
            self.client.get_person(competitor_id),
            self.client.get_avatar_lookup(competitor_id),
        )
        return normalize(raw_person, raw_avatar, competitor_id=competitor_id)

    async def fetch_totals(self, record: CompetitorRecord) -> dict[LeaderboardKey, int]:
        """Fetch every leaderboard size the record needs, all at once."""
        keys = leaderboard_keys(record)
        totals = await asyncio.gather(*(
            self.client.get_leaderboard_total(key.scope, key.discipline, key.event_id)
            for key in keys
        ))

        missing = sum(1 for total in totals if total == 0)
        if missing:
            logger.warning(
                f"{missing}/{len(keys)} leaderboard totals unavailable "
                f"for {record.competitor_id}"
            )
        return dict(zip(keys, totals))

    async def get_profile(self, competitor_id: str) -> CompetitorProfile:
        """
        Competitor record plus percentile standings for every event.

        Raises:
            InvalidCompetitorId, CompetitorNotFound, FederationAPIError,
            InvalidCompetitorPayload, NoRecordsFound
        """
        record = await self.fetch_competitor(competitor_id)
        logger.info(
            f"Profile {record.competitor_id}: {len(record.personal_records)} events"
        )

        totals = await self.fetch_totals(record)
        return CompetitorProfile(
            record=record,
            events=build_event_standings(record, totals),
        )

    async def compare(self, first_id: str, second_id: str) -> HeadToHead:
        """
        Head-to-head comparison; both competitors are fetched concurrently.

        Any failure fetching either competitor fails the comparison.
        """
        first, second = await asyncio.gather(
            self.fetch_competitor(first_id),
            self.fetch_competitor(second_id),
        )
        result = compare_points(first, second)

        logger.info(
            f"Compare {first.competitor_id} vs {second.competitor_id}: "
            f"fair {result.fair.first}-{result.fair.second}, "
            f"unfair {result.unfair.first}-{result.unfair.second}"
        )
        return HeadToHead(first=first, second=second, result=result)
