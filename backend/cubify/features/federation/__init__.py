"""
Federation API integration.

Usage:
    from cubify.features.federation import FederationClient
"""

from .client import (
    FederationClient,
    FederationError,
    FederationAPIError,
    CompetitorNotFound,
)

__all__ = [
    "FederationClient",
    "FederationError",
    "FederationAPIError",
    "CompetitorNotFound",
]
