"""
Federation lookup tables.

Single source of truth for event names, continent leaderboard scopes
and the sentinel used when a competitor's country is unknown.
All tables are read-only.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Discipline(str, Enum):
    """
    The two kinds of result inside one event.

    Values match the federation's leaderboard URL segment.
    """
    SINGLE = "single"
    AVERAGE = "average"


class RankLevel(str, Enum):
    """Leaderboard scope a rank was computed against."""
    NATIONAL = "national"
    CONTINENTAL = "continental"
    WORLD = "world"

    @property
    def abbreviation(self) -> str:
        """Short label used by the federation: NR / CR / WR."""
        return _LEVEL_ABBREVIATIONS[self]


_LEVEL_ABBREVIATIONS = {
    RankLevel.NATIONAL: "NR",
    RankLevel.CONTINENTAL: "CR",
    RankLevel.WORLD: "WR",
}

# Display order, narrowest scope first
RANK_LEVELS: tuple[RankLevel, ...] = (
    RankLevel.NATIONAL,
    RankLevel.CONTINENTAL,
    RankLevel.WORLD,
)


# Leaderboard scope for the whole world
WORLD_SCOPE = "world"

# Country code used when the payload carries no country at all
UNKNOWN_COUNTRY_ISO2 = "XX"
UNKNOWN_COUNTRY_NAME = "Unknown region"


EVENT_NAMES: Mapping[str, str] = MappingProxyType({
    "333": "3×3 Cube",
    "222": "2×2 Cube",
    "444": "4×4 Cube",
    "555": "5×5 Cube",
    "666": "6×6 Cube",
    "777": "7×7 Cube",
    "333bf": "3×3 Blindfolded",
    "333fm": "3×3 Fewest Moves",
    "333oh": "3×3 One-Handed",
    "clock": "Clock",
    "minx": "Megaminx",
    "pyram": "Pyraminx",
    "skewb": "Skewb",
    "sq1": "Square-1",
    "444bf": "4×4 Blindfolded",
    "555bf": "5×5 Blindfolded",
    "333mbf": "3×3 Multi-Blind",
})

# Events whose results are not times
FEWEST_MOVES_EVENT = "333fm"
MULTI_BLIND_EVENT = "333mbf"


CONTINENT_SCOPES: Mapping[str, str] = MappingProxyType({
    "Africa": "africa",
    "Asia": "asia",
    "Europe": "europe",
    "North America": "north-america",
    "Oceania": "oceania",
    "South America": "south-america",
})

CONTINENT_EMOJIS: Mapping[str, str] = MappingProxyType({
    "Asia": "\U0001f30f",
    "Europe": "\U0001f30d",
    "North America": "\U0001f30e",
    "South America": "\U0001f30e",
    "Africa": "\U0001f30d",
    "Oceania": "\U0001f30f",
})

DEFAULT_CONTINENT_EMOJI = "\U0001f30d"
WHITE_FLAG_EMOJI = "\U0001f3f3️"

FLAG_IMAGE_URL = "https://flagcdn.com/24x18/{iso2}.png"
