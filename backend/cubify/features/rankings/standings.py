"""
Percentile standings.

Converts rank numbers and leaderboard sizes into percentiles.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from cubify.shared.constants import Discipline, RANK_LEVELS, RankLevel, WORLD_SCOPE
from .models import (
    CompetitorRecord,
    DisciplineStandings,
    EventStandings,
    LeaderboardKey,
    RankedResult,
    RegionStanding,
    UNRANKED,
)


def compute_standing(rank: Optional[int], total_competitors: Optional[int]) -> RegionStanding:
    """
    Standing of a rank on a leaderboard of `total_competitors`.

    percentile = (1 - (rank - 1) / total) * 100, so rank 1 is always 100.
    A missing or non-positive rank or total gives the UNRANKED placeholder.

    Args:
        rank: 1-based rank
        total_competitors: Leaderboard size

    Returns:
        RegionStanding
    """
    if not rank or not total_competitors or rank <= 0 or total_competitors <= 0:
        return UNRANKED

    percent_down_list = rank / total_competitors * 100
    percentile = (1 - (rank - 1) / total_competitors) * 100

    return RegionStanding(
        total_competitors=total_competitors,
        percentile=max(0.0, min(100.0, percentile)),
        percent_down_list=max(0.0, min(100.0, percent_down_list)),
    )


def level_scope(record: CompetitorRecord, level: RankLevel) -> Optional[str]:
    """Leaderboard scope code for a level; None when it cannot be looked up."""
    if level == RankLevel.WORLD:
        return WORLD_SCOPE
    if level == RankLevel.CONTINENTAL:
        return record.continental_scope
    return record.country.leaderboard_scope


def leaderboard_keys(record: CompetitorRecord) -> list[LeaderboardKey]:
    """All leaderboards needed to compute a record's standings, without duplicates."""
    keys: list[LeaderboardKey] = []
    for event_id, personal_record in record.personal_records.items():
        for discipline in personal_record.disciplines:
            for level in RANK_LEVELS:
                scope = level_scope(record, level)
                if scope is None:
                    continue
                key = LeaderboardKey(scope, discipline, event_id)
                if key not in keys:
                    keys.append(key)
    return keys


def _discipline_standings(
    record: CompetitorRecord,
    event_id: str,
    discipline: Discipline,
    result: RankedResult,
    totals: Mapping[LeaderboardKey, int],
) -> DisciplineStandings:
    ranks = {}
    standings = {}
    for level in RANK_LEVELS:
        rank = result.rank_for(level)
        scope = level_scope(record, level)
        total = totals.get(LeaderboardKey(scope, discipline, event_id), 0) if scope else 0

        ranks[level] = rank
        standings[level] = compute_standing(rank, total)

    return DisciplineStandings(
        best=result.best,
        ranks=MappingProxyType(ranks),
        standings=MappingProxyType(standings),
    )


def build_event_standings(
    record: CompetitorRecord,
    totals: Mapping[LeaderboardKey, int],
) -> tuple[EventStandings, ...]:
    """
    Standings for every event of a record.

    Args:
        record: Normalized competitor
        totals: Leaderboard sizes; missing keys count as unknown

    Returns:
        One EventStandings per event, in record order
    """
    events = []
    for event_id, personal_record in record.personal_records.items():
        per_discipline = {
            discipline: _discipline_standings(
                record, event_id, discipline, personal_record.get(discipline), totals
            )
            for discipline in personal_record.disciplines
        }
        events.append(
            EventStandings(
                event_id=event_id,
                single=per_discipline.get(Discipline.SINGLE),
                average=per_discipline.get(Discipline.AVERAGE),
            )
        )
    return tuple(events)
