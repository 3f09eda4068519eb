"""
Tests for FederationClient against a mocked transport.

Person files are fatal on failure; avatar and leaderboard lookups
degrade to None / 0.
"""

import asyncio

import httpx
import pytest

from cubify.features.federation import (
    CompetitorNotFound,
    FederationAPIError,
    FederationClient,
)
from cubify.shared.constants import Discipline

STATIC_URL = "https://static.test/api"
LIVE_URL = "https://live.test/api/v0"


def run_with(handler, coro_factory):
    """Run coro_factory(client) against a client backed by handler."""
    async def main():
        client = FederationClient(
            base_url=STATIC_URL,
            live_api_url=LIVE_URL,
            timeout=5,
            max_concurrent_requests=2,
            transport=httpx.MockTransport(handler),
        )
        try:
            return await coro_factory(client)
        finally:
            await client.close()

    return asyncio.run(main())


def respond(status_code=200, json=None, text=None):
    def handler(request):
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json)
    return handler


# =============================================================================
# Person file
# =============================================================================

class TestGetPerson:
    """Tests for get_person."""

    def test_success(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"id": "2012PARK03", "name": "Max Park"})

        data = run_with(handler, lambda c: c.get_person("2012PARK03"))

        assert data["name"] == "Max Park"
        assert seen == [f"{STATIC_URL}/persons/2012PARK03.json"]

    def test_not_found(self):
        with pytest.raises(CompetitorNotFound, match="2099XXXX01"):
            run_with(respond(404, text="Not Found"), lambda c: c.get_person("2099XXXX01"))

    def test_server_error(self):
        with pytest.raises(FederationAPIError):
            run_with(respond(500, text="oops"), lambda c: c.get_person("2012PARK03"))

    def test_invalid_json(self):
        with pytest.raises(FederationAPIError):
            run_with(respond(200, text="<html>"), lambda c: c.get_person("2012PARK03"))

    def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FederationAPIError):
            run_with(handler, lambda c: c.get_person("2012PARK03"))


# =============================================================================
# Avatar lookup
# =============================================================================

class TestGetAvatarLookup:
    """Tests for get_avatar_lookup."""

    def test_success(self, avatar_lookup):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json=avatar_lookup)

        data = run_with(handler, lambda c: c.get_avatar_lookup("2012PARK03"))

        assert data == avatar_lookup
        assert seen == [f"{LIVE_URL}/persons/2012PARK03"]

    @pytest.mark.parametrize("handler", [
        respond(404, text="Not Found"),
        respond(503, text="down"),
        respond(200, text="not json"),
    ])
    def test_failures_return_none(self, handler):
        assert run_with(handler, lambda c: c.get_avatar_lookup("2012PARK03")) is None

    def test_timeout_returns_none(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        assert run_with(handler, lambda c: c.get_avatar_lookup("2012PARK03")) is None


# =============================================================================
# Leaderboard totals
# =============================================================================

class TestGetLeaderboardTotal:
    """Tests for get_leaderboard_total."""

    def test_success(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"total": 215430, "items": []})

        total = run_with(
            handler,
            lambda c: c.get_leaderboard_total("north-america", Discipline.AVERAGE, "333"),
        )

        assert total == 215430
        assert seen == [f"{STATIC_URL}/rank/north-america/average/333.json"]

    @pytest.mark.parametrize("handler", [
        respond(404, text="Not Found"),
        respond(500, text="oops"),
        respond(200, text="not json"),
        respond(200, json={"items": []}),
        respond(200, json={"total": "many"}),
        respond(200, json={"total": -4}),
        respond(200, json=[1, 2, 3]),
    ])
    def test_failures_return_zero(self, handler):
        total = run_with(handler, lambda c: c.get_leaderboard_total("US", Discipline.SINGLE, "333"))
        assert total == 0

    def test_concurrent_requests(self):
        """Many lookups through a small semaphore all complete."""
        def handler(request):
            event_id = request.url.path.rsplit("/", 1)[-1].removesuffix(".json")
            return httpx.Response(200, json={"total": len(event_id)})

        async def many(client):
            return await asyncio.gather(*(
                client.get_leaderboard_total("world", Discipline.SINGLE, event_id)
                for event_id in ["222", "333bf", "clock", "333mbf", "sq1"]
            ))

        assert run_with(handler, many) == [3, 5, 5, 6, 3]
