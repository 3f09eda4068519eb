"""
Rankings schemas.

Raw* models validate the loosely-typed federation payloads before they
are shaped into domain records. The rest are API responses.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Raw federation payloads
# =============================================================================

class RawRanks(BaseModel):
    """Rank numbers attached to one result."""
    model_config = ConfigDict(extra="ignore")

    world: Optional[int] = None
    continent: Optional[int] = None
    country: Optional[int] = None


class RawRankEntry(BaseModel):
    """One single or average entry: {"eventId": "333", "best": 313, "rank": {...}}."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    event_id: str = Field(..., alias="eventId", min_length=1)
    best: int
    rank: Optional[RawRanks] = None


class RawRankings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    singles: Optional[List[RawRankEntry]] = None
    averages: Optional[List[RawRankEntry]] = None


class RawCountry(BaseModel):
    """Country given as an object instead of a bare code."""
    model_config = ConfigDict(extra="ignore")

    iso2: Optional[str] = None
    name: Optional[str] = None


class RawCompetitor(BaseModel):
    """Person file from the federation's static API."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, str_strip_whitespace=True)

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    country: Optional[Union[str, RawCountry]] = None
    country_iso2: Optional[str] = Field(default=None, alias="countryIso2")
    continent: Optional[str] = None
    rank: Optional[RawRankings] = None


class RawAvatar(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    is_default: bool = False


class RawAvatarPerson(BaseModel):
    model_config = ConfigDict(extra="ignore")

    avatar: Optional[RawAvatar] = None


class RawAvatarLookup(BaseModel):
    """Person lookup from the federation's live API; only the avatar is used."""
    model_config = ConfigDict(extra="ignore")

    person: Optional[RawAvatarPerson] = None


# =============================================================================
# API responses
# =============================================================================

class CountrySchema(BaseModel):
    name: str
    iso2: str
    flag_emoji: str
    flag_url: Optional[str] = None
    is_unknown: bool = False


class CompetitorSchema(BaseModel):
    """Competitor identity block."""
    competitor_id: str
    name: str
    country: CountrySchema
    continent: Optional[str] = None
    continent_emoji: str
    avatar_url: Optional[str] = None
    profile_url: str
    events: List[str] = []


class LevelStandingSchema(BaseModel):
    """Rank and percentile on one leaderboard."""
    rank: Optional[int] = None
    total_competitors: int = 0
    percentile: float = Field(0.0, description="100 = best")
    percent_down_list: float = 0.0
    ranked: bool = False
    label: Optional[str] = Field(None, description="None when there is no rank")


class DisciplineSchema(BaseModel):
    best: int
    best_formatted: str
    national: LevelStandingSchema
    continental: LevelStandingSchema
    world: LevelStandingSchema


class EventSchema(BaseModel):
    event_id: str
    event_name: str
    single: Optional[DisciplineSchema] = None
    average: Optional[DisciplineSchema] = None


class CompetitorProfileResponse(BaseModel):
    competitor: CompetitorSchema
    events: List[EventSchema] = []


class TallySchema(BaseModel):
    first_points: int
    second_points: int
    events: List[str] = []


class DuelSideSchema(BaseModel):
    """One competitor's results in a duel."""
    single: Optional[str] = None
    single_world_rank: Optional[int] = None
    average: Optional[str] = None
    average_world_rank: Optional[int] = None


class EventDuelSchema(BaseModel):
    event_id: str
    event_name: str
    first: DuelSideSchema
    second: DuelSideSchema
    single_winner: Optional[str] = None
    average_winner: Optional[str] = None


class ComparisonResponse(BaseModel):
    first: CompetitorSchema
    second: CompetitorSchema
    fair: TallySchema
    unfair: TallySchema
    duels: List[EventDuelSchema] = []
