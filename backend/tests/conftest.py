"""
Shared test data: raw federation payloads and an in-memory federation client.
"""

import pytest

from cubify.features.federation import CompetitorNotFound


def rank_entry(event_id: str, best: int, world=None, continent=None, country=None) -> dict:
    """One raw single/average entry as served by the static API."""
    return {
        "eventId": event_id,
        "best": best,
        "rank": {"world": world, "continent": continent, "country": country},
    }


def person_payload(
    competitor_id: str = "2012PARK03",
    name: str = "Max Park",
    country: str | None = "US",
    continent: str | None = "North America",
    singles: list | None = None,
    averages: list | None = None,
) -> dict:
    payload = {
        "id": competitor_id,
        "name": name,
        "rank": {
            "singles": singles if singles is not None else [],
            "averages": averages if averages is not None else [],
        },
    }
    if country is not None:
        payload["country"] = country
    if continent is not None:
        payload["continent"] = continent
    return payload


class FakeFederationClient:
    """Serves canned payloads; records every leaderboard request."""

    def __init__(self, persons=None, avatars=None, totals=None, person_error=None):
        self.persons = persons or {}
        self.avatars = avatars or {}
        self.totals = totals or {}
        self.person_error = person_error
        self.leaderboard_requests = []

    async def get_person(self, competitor_id):
        if self.person_error is not None:
            raise self.person_error
        if competitor_id not in self.persons:
            raise CompetitorNotFound(f"Competitor {competitor_id} not found. Please check the WCA ID.")
        return self.persons[competitor_id]

    async def get_avatar_lookup(self, competitor_id):
        return self.avatars.get(competitor_id)

    async def get_leaderboard_total(self, scope, discipline, event_id):
        self.leaderboard_requests.append((scope, discipline, event_id))
        return self.totals.get((scope, discipline, event_id), 0)


@pytest.fixture
def max_park_payload():
    """Competitor with singles and averages in two events."""
    return person_payload(
        singles=[
            rank_entry("333", 313, world=2, continent=1, country=1),
            rank_entry("444", 1938, world=1, continent=1, country=1),
        ],
        averages=[
            rank_entry("333", 421, world=1, continent=1, country=1),
            rank_entry("444", 2160, world=1, continent=1, country=1),
        ],
    )


@pytest.fixture
def avatar_lookup():
    return {
        "person": {
            "avatar": {
                "url": "https://avatars.worldcubeassociation.org/2012PARK03.jpg",
                "is_default": False,
            }
        }
    }
