"""Rankings feature module: normalization, percentiles, comparisons."""

from .models import (
    Country,
    RankedResult,
    PersonalRecord,
    CompetitorRecord,
    RegionStanding,
    UNRANKED,
    LeaderboardKey,
    DisciplineStandings,
    EventStandings,
    CompetitorProfile,
    Winner,
    Tally,
    EventDuel,
    ComparisonResult,
    HeadToHead,
)
from .normalizer import (
    RankingsError,
    InvalidCompetitorPayload,
    NoRecordsFound,
    normalize,
    continent_scope,
)
from .standings import compute_standing, build_event_standings, leaderboard_keys
from .comparison import compare_points, better
from .service import (
    RankingsService,
    InvalidCompetitorId,
    normalize_competitor_id,
)

__all__ = [
    "Country",
    "RankedResult",
    "PersonalRecord",
    "CompetitorRecord",
    "RegionStanding",
    "UNRANKED",
    "LeaderboardKey",
    "DisciplineStandings",
    "EventStandings",
    "CompetitorProfile",
    "Winner",
    "Tally",
    "EventDuel",
    "ComparisonResult",
    "HeadToHead",
    "RankingsError",
    "InvalidCompetitorPayload",
    "NoRecordsFound",
    "normalize",
    "continent_scope",
    "compute_standing",
    "build_event_standings",
    "leaderboard_keys",
    "compare_points",
    "better",
    "RankingsService",
    "InvalidCompetitorId",
    "normalize_competitor_id",
]
