"""API clients for backend communication."""
from .base import BaseAPIClient, APIError
from .competitors import CompetitorsClient
from .health import HealthClient


class APIClient:
    """Unified API client with all sub-clients."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url
        self.competitors = CompetitorsClient(base_url, timeout)
        self.health = HealthClient(base_url)

    async def close(self):
        """Close all client sessions."""
        await self.competitors.close()
        await self.health.close()

    # Health
    async def health_check(self) -> bool:
        return await self.health.check()


__all__ = [
    "APIClient",
    "APIError",
    "BaseAPIClient",
    "CompetitorsClient",
    "HealthClient",
]
