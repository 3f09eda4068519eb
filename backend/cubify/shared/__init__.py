"""
Shared utilities (NOT business logic).

Usage:
    from cubify.shared import Discipline, RankLevel
    from cubify.shared.formatters import format_result
"""
from .constants import (
    Discipline,
    RankLevel,
    RANK_LEVELS,
    WORLD_SCOPE,
    UNKNOWN_COUNTRY_ISO2,
    UNKNOWN_COUNTRY_NAME,
    EVENT_NAMES,
    CONTINENT_SCOPES,
    CONTINENT_EMOJIS,
)
from .formatters import (
    format_result,
    format_standing,
    event_name,
    flag_emoji,
    flag_url,
    continent_emoji,
    is_unknown_region,
)

__all__ = [
    # constants
    "Discipline",
    "RankLevel",
    "RANK_LEVELS",
    "WORLD_SCOPE",
    "UNKNOWN_COUNTRY_ISO2",
    "UNKNOWN_COUNTRY_NAME",
    "EVENT_NAMES",
    "CONTINENT_SCOPES",
    "CONTINENT_EMOJIS",
    # formatters
    "format_result",
    "format_standing",
    "event_name",
    "flag_emoji",
    "flag_url",
    "continent_emoji",
    "is_unknown_region",
]
