"""
Head-to-head comparison endpoint.

Endpoints:
- GET /compare?first=...&second=... - Fair and unfair point tallies
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from cubify.api.deps import get_rankings_service
from cubify.api.v1.routes.competitors import competitor_schema, raise_http_error
from cubify.features.federation import CompetitorNotFound, FederationAPIError
from cubify.features.rankings import (
    CompetitorRecord,
    EventDuel,
    InvalidCompetitorId,
    InvalidCompetitorPayload,
    NoRecordsFound,
    RankingsService,
    Tally,
    Winner,
)
from cubify.features.rankings.schemas import (
    ComparisonResponse,
    DuelSideSchema,
    EventDuelSchema,
    TallySchema,
)
from cubify.shared.constants import Discipline
from cubify.shared.formatters import event_name, format_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/compare", tags=["Compare"])


def _tally_schema(tally: Tally) -> TallySchema:
    return TallySchema(
        first_points=tally.first,
        second_points=tally.second,
        events=list(tally.events),
    )


def _side_schema(record: CompetitorRecord, event_id: str) -> DuelSideSchema:
    personal_record = record.personal_records.get(event_id)
    if personal_record is None:
        return DuelSideSchema()

    single = personal_record.single
    average = personal_record.average
    return DuelSideSchema(
        single=format_result(event_id, single.best, Discipline.SINGLE) if single else None,
        single_world_rank=single.world_rank if single else None,
        average=format_result(event_id, average.best, Discipline.AVERAGE) if average else None,
        average_world_rank=average.world_rank if average else None,
    )


def _winner(winner: Optional[Winner]) -> Optional[str]:
    return winner.value if winner else None


def _duel_schema(duel: EventDuel, first: CompetitorRecord, second: CompetitorRecord) -> EventDuelSchema:
    return EventDuelSchema(
        event_id=duel.event_id,
        event_name=event_name(duel.event_id),
        first=_side_schema(first, duel.event_id),
        second=_side_schema(second, duel.event_id),
        single_winner=_winner(duel.single_winner),
        average_winner=_winner(duel.average_winner),
    )


@router.get("", response_model=ComparisonResponse)
async def compare_competitors(
    first: str = Query(..., description="WCA ID of the first competitor"),
    second: str = Query(..., description="WCA ID of the second competitor"),
    service: RankingsService = Depends(get_rankings_service),
):
    """
    Compare two competitors event by event on world rank.

    fair: only events both have results in.
    unfair: all events; a result the opponent lacks scores a point.
    """
    try:
        head_to_head = await service.compare(first, second)
    except (InvalidCompetitorId, CompetitorNotFound, NoRecordsFound,
            InvalidCompetitorPayload, FederationAPIError) as e:
        logger.info(f"Compare {first} vs {second} failed: {e}")
        raise_http_error(e)

    result = head_to_head.result
    return ComparisonResponse(
        first=competitor_schema(head_to_head.first),
        second=competitor_schema(head_to_head.second),
        fair=_tally_schema(result.fair),
        unfair=_tally_schema(result.unfair),
        duels=[
            _duel_schema(duel, head_to_head.first, head_to_head.second)
            for duel in result.duels
        ],
    )
