"""Domain models for competitor rankings (dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from cubify.shared.constants import Discipline, RankLevel
from cubify.shared.formatters import is_unknown_region


# =============================================================================
# Competitor record
# =============================================================================

@dataclass(frozen=True)
class Country:
    """Country a competitor represents."""

    name: str  # "United States"
    iso2: str  # "us", lowercase

    @property
    def is_unknown(self) -> bool:
        """True when the payload carried no usable country code."""
        return is_unknown_region(self.iso2)

    @property
    def leaderboard_scope(self) -> Optional[str]:
        """National leaderboard code ("US"), None for the unknown region."""
        if self.is_unknown:
            return None
        return self.iso2.upper()


@dataclass(frozen=True)
class RankedResult:
    """Best result in one discipline with its ranks."""

    best: int  # centiseconds, moves or packed multi-blind value
    world_rank: Optional[int] = None
    continental_rank: Optional[int] = None
    national_rank: Optional[int] = None

    def rank_for(self, level: RankLevel) -> Optional[int]:
        if level == RankLevel.WORLD:
            return self.world_rank
        if level == RankLevel.CONTINENTAL:
            return self.continental_rank
        return self.national_rank


@dataclass(frozen=True)
class PersonalRecord:
    """Single and/or average result for one event."""

    single: Optional[RankedResult] = None
    average: Optional[RankedResult] = None

    def __post_init__(self):
        if self.single is None and self.average is None:
            raise ValueError("PersonalRecord needs a single or an average")

    def get(self, discipline: Discipline) -> Optional[RankedResult]:
        if discipline == Discipline.SINGLE:
            return self.single
        return self.average

    @property
    def disciplines(self) -> tuple[Discipline, ...]:
        """Disciplines this record holds a result in."""
        return tuple(d for d in Discipline if self.get(d) is not None)


@dataclass(frozen=True)
class CompetitorRecord:
    """A federation member's results and identifying metadata."""

    competitor_id: str  # "2012PARK03"
    name: str
    country: Country
    continent: Optional[str]  # "North America"
    continental_scope: str  # "north-america", or "world" when unmapped
    personal_records: Mapping[str, PersonalRecord] = field(
        default_factory=lambda: MappingProxyType({})
    )
    avatar_url: Optional[str] = None

    @property
    def events(self) -> tuple[str, ...]:
        return tuple(self.personal_records)


# =============================================================================
# Standings
# =============================================================================

@dataclass(frozen=True)
class RegionStanding:
    """
    Position on one leaderboard.

    The all-zero value is the unranked placeholder: either the competitor
    has no rank there or the leaderboard size is unknown.
    """

    total_competitors: int = 0
    percentile: float = 0.0  # 100 = best
    percent_down_list: float = 0.0

    @property
    def is_ranked(self) -> bool:
        return self.total_competitors > 0


UNRANKED = RegionStanding()


class LeaderboardKey(NamedTuple):
    """Identifies one leaderboard: ("world", "single", "333")."""

    scope: str
    discipline: Discipline
    event_id: str


@dataclass(frozen=True)
class DisciplineStandings:
    """Ranks and standings of one discipline across all levels."""

    best: int
    ranks: Mapping[RankLevel, Optional[int]]
    standings: Mapping[RankLevel, RegionStanding]


@dataclass(frozen=True)
class EventStandings:
    """Standings for one event."""

    event_id: str
    single: Optional[DisciplineStandings] = None
    average: Optional[DisciplineStandings] = None

    def get(self, discipline: Discipline) -> Optional[DisciplineStandings]:
        if discipline == Discipline.SINGLE:
            return self.single
        return self.average


@dataclass(frozen=True)
class CompetitorProfile:
    """Everything shown on a competitor's page."""

    record: CompetitorRecord
    events: tuple[EventStandings, ...] = ()


# =============================================================================
# Comparison
# =============================================================================

class Winner(str, Enum):
    """Outcome of one per-discipline duel."""
    FIRST = "first"
    SECOND = "second"
    TIE = "tie"


@dataclass(frozen=True)
class Tally:
    """Points for both competitors under one scoring policy."""

    first: int = 0
    second: int = 0
    events: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventDuel:
    """Per-discipline winners for one event (None = not contested)."""

    event_id: str
    single_winner: Optional[Winner] = None
    average_winner: Optional[Winner] = None


@dataclass(frozen=True)
class ComparisonResult:
    """Fair (shared events) and unfair (all events) tallies."""

    fair: Tally
    unfair: Tally
    duels: tuple[EventDuel, ...] = ()


@dataclass(frozen=True)
class HeadToHead:
    """Two competitors and their comparison."""

    first: CompetitorRecord
    second: CompetitorRecord
    result: ComparisonResult
