"""
Record Normalizer

Shapes a raw federation person payload into an immutable CompetitorRecord.
Pure transform: no I/O, no logging.
"""

from types import MappingProxyType
from typing import Any, Optional

import pycountry
from pydantic import ValidationError

from cubify.shared.constants import (
    CONTINENT_SCOPES,
    Discipline,
    UNKNOWN_COUNTRY_ISO2,
    UNKNOWN_COUNTRY_NAME,
    WORLD_SCOPE,
)
from .models import CompetitorRecord, Country, PersonalRecord, RankedResult
from .schemas import (
    RawAvatarLookup,
    RawCompetitor,
    RawCountry,
    RawRankEntry,
    RawRanks,
)


# =============================================================================
# Exceptions
# =============================================================================

class RankingsError(Exception):
    """Base rankings error."""
    pass


class InvalidCompetitorPayload(RankingsError):
    """Payload does not meet the minimum-field contract (e.g. no name)."""
    pass


class NoRecordsFound(RankingsError):
    """Payload has no singles and no averages."""
    pass


# =============================================================================
# Lookups
# =============================================================================

def continent_scope(continent: Optional[str]) -> str:
    """Leaderboard code for a continent label; unmapped labels use the world."""
    if not continent:
        return WORLD_SCOPE
    return CONTINENT_SCOPES.get(continent, WORLD_SCOPE)


def country_name(iso2: str) -> str:
    """Display name for an ISO-2 code, or the code itself if unknown."""
    code = iso2.upper()
    if code == UNKNOWN_COUNTRY_ISO2:
        return UNKNOWN_COUNTRY_NAME

    try:
        country = pycountry.countries.get(alpha_2=code)
    except LookupError:
        country = None
    if country is None:
        return code
    return getattr(country, "common_name", None) or country.name


def _country_code(value: Optional[str]) -> Optional[str]:
    """Upper-case ISO-2 code, or None when the value is not two letters."""
    if not value:
        return None
    code = value.strip()
    if len(code) != 2 or not code.isalpha():
        return None
    return code.upper()


def extract_country(raw: RawCompetitor) -> Country:
    """
    Pick the country code: `country`, then `countryIso2`, then the sentinel.

    A `country` that is not a two-letter code ("United States") is kept
    as the display name and the chain moves on to `countryIso2`.
    The sentinel produces Country.is_unknown instead of a fake country.
    """
    code = None
    explicit_name = None

    if isinstance(raw.country, RawCountry):
        code = _country_code(raw.country.iso2)
        explicit_name = raw.country.name
    elif raw.country:
        code = _country_code(raw.country)
        if code is None:
            explicit_name = raw.country

    code = code or _country_code(raw.country_iso2) or UNKNOWN_COUNTRY_ISO2

    name = explicit_name or country_name(code)
    return Country(name=name, iso2=code.lower())


def extract_avatar_url(raw_avatar_lookup: Any) -> Optional[str]:
    """Avatar URL from a lookup result; anything unusable means no avatar."""
    if not raw_avatar_lookup:
        return None

    try:
        lookup = RawAvatarLookup.model_validate(raw_avatar_lookup)
    except ValidationError:
        return None

    avatar = lookup.person.avatar if lookup.person else None
    if avatar is None or avatar.is_default or not avatar.url:
        return None
    return avatar.url


# =============================================================================
# Normalization
# =============================================================================

def _positive(rank: Optional[int]) -> Optional[int]:
    return rank if rank and rank > 0 else None


def _ranked_result(entry: RawRankEntry) -> RankedResult:
    ranks = entry.rank or RawRanks()
    return RankedResult(
        best=entry.best,
        world_rank=_positive(ranks.world),
        continental_rank=_positive(ranks.continent),
        national_rank=_positive(ranks.country),
    )


def _merge_records(raw: RawCompetitor) -> dict[str, PersonalRecord]:
    """Merge singles and averages of the same event into one record."""
    rankings = raw.rank
    if rankings is None:
        return {}

    collected: dict[str, dict[Discipline, RankedResult]] = {}
    for discipline, entries in (
        (Discipline.SINGLE, rankings.singles),
        (Discipline.AVERAGE, rankings.averages),
    ):
        for entry in entries or []:
            collected.setdefault(entry.event_id, {})[discipline] = _ranked_result(entry)

    return {
        event_id: PersonalRecord(
            single=results.get(Discipline.SINGLE),
            average=results.get(Discipline.AVERAGE),
        )
        for event_id, results in collected.items()
    }


def normalize(
    raw_competitor: Any,
    raw_avatar_lookup: Any = None,
    competitor_id: Optional[str] = None,
) -> CompetitorRecord:
    """
    Build a CompetitorRecord from raw federation data.

    Args:
        raw_competitor: Person payload (dict) from the federation's static API
        raw_avatar_lookup: Optional person lookup carrying the avatar
        competitor_id: Used when the payload has no `id` of its own

    Returns:
        CompetitorRecord

    Raises:
        InvalidCompetitorPayload: Not a mapping, or no usable name
        NoRecordsFound: No singles and no averages
    """
    if not isinstance(raw_competitor, dict):
        raise InvalidCompetitorPayload("Competitor payload must be an object")

    try:
        raw = RawCompetitor.model_validate(raw_competitor)
    except ValidationError as e:
        raise InvalidCompetitorPayload(f"Invalid competitor data: {e.error_count()} error(s)") from e

    records = _merge_records(raw)
    if not records:
        raise NoRecordsFound("No competition records found for this competitor.")

    return CompetitorRecord(
        competitor_id=raw.id or competitor_id or "",
        name=raw.name,
        country=extract_country(raw),
        continent=raw.continent,
        continental_scope=continent_scope(raw.continent),
        personal_records=MappingProxyType(records),
        avatar_url=extract_avatar_url(raw_avatar_lookup),
    )
