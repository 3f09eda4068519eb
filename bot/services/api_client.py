"""
Backend API Client

Global client instance shared by all handlers.
"""

from config import settings
from services.clients import APIClient, APIError

__all__ = ["api_client", "APIClient", "APIError"]


# Global client instance
api_client = APIClient(settings.backend_url, timeout=settings.request_timeout)
