"""
Head-to-head comparison.

Scores two competitors discipline by discipline on world rank:
- fair: only events both competitors have results in
- unfair: every event either competitor has; holding a result the
  opponent lacks is worth a point per discipline
"""

from __future__ import annotations

from typing import Optional

from cubify.shared.constants import Discipline
from .models import (
    ComparisonResult,
    CompetitorRecord,
    EventDuel,
    PersonalRecord,
    Tally,
    Winner,
)


def better(first_rank: Optional[int], second_rank: Optional[int]) -> Winner:
    """Lower rank wins; a present rank beats an absent one."""
    if not first_rank and not second_rank:
        return Winner.TIE
    if not first_rank:
        return Winner.SECOND
    if not second_rank:
        return Winner.FIRST
    if first_rank < second_rank:
        return Winner.FIRST
    if first_rank > second_rank:
        return Winner.SECOND
    return Winner.TIE


def _duel(first: PersonalRecord, second: PersonalRecord, discipline: Discipline) -> Optional[Winner]:
    """Winner of one discipline, None unless both hold a result in it."""
    first_result = first.get(discipline)
    second_result = second.get(discipline)
    if first_result is None or second_result is None:
        return None
    return better(first_result.world_rank, second_result.world_rank)


def _points(winners: list[Optional[Winner]]) -> tuple[int, int]:
    first = sum(1 for w in winners if w == Winner.FIRST)
    second = sum(1 for w in winners if w == Winner.SECOND)
    return first, second


def compare_points(first: CompetitorRecord, second: CompetitorRecord) -> ComparisonResult:
    """
    Fair and unfair point tallies for two competitors.

    Args:
        first: Competitor scored as "first"
        second: Competitor scored as "second"

    Returns:
        ComparisonResult with both tallies and per-event duels
    """
    first_records = first.personal_records
    second_records = second.personal_records

    all_events = sorted(set(first_records) | set(second_records))
    shared_events = [e for e in all_events if e in first_records and e in second_records]

    fair_first = fair_second = 0
    unfair_first = unfair_second = 0
    duels = []

    for event_id in all_events:
        first_record = first_records.get(event_id)
        second_record = second_records.get(event_id)

        if first_record is None:
            unfair_second += len(second_record.disciplines)
            duels.append(EventDuel(event_id=event_id))
            continue
        if second_record is None:
            unfair_first += len(first_record.disciplines)
            duels.append(EventDuel(event_id=event_id))
            continue

        single_winner = _duel(first_record, second_record, Discipline.SINGLE)
        average_winner = _duel(first_record, second_record, Discipline.AVERAGE)
        duels.append(EventDuel(event_id, single_winner, average_winner))

        won_first, won_second = _points([single_winner, average_winner])
        fair_first += won_first
        fair_second += won_second
        unfair_first += won_first
        unfair_second += won_second

    return ComparisonResult(
        fair=Tally(fair_first, fair_second, tuple(shared_events)),
        unfair=Tally(unfair_first, unfair_second, tuple(all_events)),
        duels=tuple(duels),
    )
