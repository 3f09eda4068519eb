"""
Shared route dependencies.
"""

from fastapi import Request

from cubify.features.federation import FederationClient
from cubify.features.rankings import RankingsService


def get_federation_client(request: Request) -> FederationClient:
    """
    Client created in the app lifespan.

    The lifespan also closes it, so no client is created here.

    Raises:
        RuntimeError: The app was started without its lifespan
    """
    client = getattr(request.app.state, "federation_client", None)
    if client is None:
        raise RuntimeError("Federation client is not initialized; start the app with its lifespan")
    return client


def get_rankings_service(request: Request) -> RankingsService:
    return RankingsService(get_federation_client(request))
