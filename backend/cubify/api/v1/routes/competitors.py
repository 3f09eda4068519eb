"""
Competitor profile endpoint.

Endpoints:
- GET /competitors/{competitor_id} - Records, ranks and percentiles per event
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from cubify.api.deps import get_rankings_service
from cubify.config import settings
from cubify.features.federation import CompetitorNotFound, FederationAPIError
from cubify.features.rankings import (
    CompetitorRecord,
    DisciplineStandings,
    EventStandings,
    InvalidCompetitorId,
    InvalidCompetitorPayload,
    NoRecordsFound,
    RankingsService,
)
from cubify.features.rankings.schemas import (
    CompetitorProfileResponse,
    CompetitorSchema,
    CountrySchema,
    DisciplineSchema,
    EventSchema,
    LevelStandingSchema,
)
from cubify.shared.constants import Discipline, RankLevel
from cubify.shared.formatters import (
    continent_emoji,
    event_name,
    flag_emoji,
    flag_url,
    format_result,
    format_standing,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/competitors", tags=["Competitors"])


# =============================================================================
# Error mapping
# =============================================================================

def raise_http_error(error: Exception):
    """Translate a rankings/federation error into an HTTPException."""
    if isinstance(error, InvalidCompetitorId):
        raise HTTPException(status_code=400, detail=str(error))
    if isinstance(error, (CompetitorNotFound, NoRecordsFound)):
        raise HTTPException(status_code=404, detail=str(error))
    if isinstance(error, InvalidCompetitorPayload):
        raise HTTPException(status_code=502, detail="Invalid competitor data received from the federation")
    if isinstance(error, FederationAPIError):
        raise HTTPException(status_code=502, detail=str(error))
    raise error


# =============================================================================
# Builders
# =============================================================================

def competitor_schema(record: CompetitorRecord) -> CompetitorSchema:
    """Identity block shared by profile and comparison responses."""
    country = record.country
    return CompetitorSchema(
        competitor_id=record.competitor_id,
        name=record.name,
        country=CountrySchema(
            name=country.name,
            iso2=country.iso2,
            flag_emoji=flag_emoji(country.iso2),
            flag_url=flag_url(country.iso2),
            is_unknown=country.is_unknown,
        ),
        continent=record.continent,
        continent_emoji=continent_emoji(record.continent),
        avatar_url=record.avatar_url,
        profile_url=f"{settings.wca_profile_url}/{record.competitor_id}",
        events=list(record.events),
    )


def _level_schema(standings: DisciplineStandings, level: RankLevel) -> LevelStandingSchema:
    rank = standings.ranks[level]
    standing = standings.standings[level]
    return LevelStandingSchema(
        rank=rank,
        total_competitors=standing.total_competitors,
        percentile=round(standing.percentile, 4),
        percent_down_list=round(standing.percent_down_list, 4),
        ranked=standing.is_ranked,
        label=format_standing(standing.percentile) if rank else None,
    )


def _discipline_schema(
    event_id: str,
    discipline: Discipline,
    standings: Optional[DisciplineStandings],
) -> Optional[DisciplineSchema]:
    if standings is None:
        return None
    return DisciplineSchema(
        best=standings.best,
        best_formatted=format_result(event_id, standings.best, discipline),
        national=_level_schema(standings, RankLevel.NATIONAL),
        continental=_level_schema(standings, RankLevel.CONTINENTAL),
        world=_level_schema(standings, RankLevel.WORLD),
    )


def event_schema(event: EventStandings) -> EventSchema:
    return EventSchema(
        event_id=event.event_id,
        event_name=event_name(event.event_id),
        single=_discipline_schema(event.event_id, Discipline.SINGLE, event.single),
        average=_discipline_schema(event.event_id, Discipline.AVERAGE, event.average),
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/{competitor_id}", response_model=CompetitorProfileResponse)
async def get_competitor_profile(
    competitor_id: str,
    service: RankingsService = Depends(get_rankings_service),
):
    """
    Get a competitor's personal records with national, continental and
    world percentiles for every event.
    """
    try:
        profile = await service.get_profile(competitor_id)
    except (InvalidCompetitorId, CompetitorNotFound, NoRecordsFound,
            InvalidCompetitorPayload, FederationAPIError) as e:
        logger.info(f"Profile {competitor_id} failed: {e}")
        raise_http_error(e)

    return CompetitorProfileResponse(
        competitor=competitor_schema(profile.record),
        events=[event_schema(event) for event in profile.events],
    )
