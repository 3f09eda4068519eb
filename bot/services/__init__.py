"""Bot services."""

from services.api_client import api_client, APIClient, APIError

__all__ = ["api_client", "APIClient", "APIError"]
