"""
Formatting utilities for display.

Used by the API responses; the bot shows the strings as-is.
"""

from typing import Optional

from .constants import (
    CONTINENT_EMOJIS,
    DEFAULT_CONTINENT_EMOJI,
    Discipline,
    EVENT_NAMES,
    FEWEST_MOVES_EVENT,
    FLAG_IMAGE_URL,
    MULTI_BLIND_EVENT,
    UNKNOWN_COUNTRY_ISO2,
    WHITE_FLAG_EMOJI,
)

# Federation result codes
DNF = -1
DNS = -2


def format_centiseconds(centiseconds: int) -> str:
    """
    Format a time result.

    Args:
        centiseconds: Time in hundredths of a second (e.g., 1234)

    Returns:
        '12.34s' under a minute, '1:02.34' otherwise
    """
    seconds = centiseconds / 100
    if seconds < 60:
        return f"{seconds:.2f}s"

    minutes = int(seconds // 60)
    return f"{minutes}:{seconds - minutes * 60:05.2f}"


def format_multi_blind(value: int) -> str:
    """
    Decode a packed multi-blind result.

    The federation stores 0DDTTTTTMM: DD = 99 - (solved - missed),
    TTTTT = time in seconds, MM = missed cubes.

    Returns:
        Formatted string (e.g., '10/12 58:21')
    """
    missed = value % 100
    seconds = (value // 100) % 100000
    difference = 99 - (value // 10000000) % 100

    solved = difference + missed
    attempted = solved + missed
    minutes, secs = divmod(seconds, 60)
    return f"{solved}/{attempted} {minutes}:{secs:02d}"


def format_result(
    event_id: str,
    value: Optional[int],
    discipline: Discipline = Discipline.SINGLE,
) -> str:
    """
    Format a best result for an event.

    Fewest moves results are move counts (averages are stored x100),
    multi-blind results are packed integers, everything else is
    centiseconds.
    """
    if value is None or value == 0:
        return "—"
    if value == DNF:
        return "DNF"
    if value == DNS:
        return "DNS"

    if event_id == FEWEST_MOVES_EVENT:
        if discipline == Discipline.AVERAGE:
            return f"{value / 100:.2f} moves"
        return f"{value} moves"

    if event_id == MULTI_BLIND_EVENT:
        return format_multi_blind(value)

    return format_centiseconds(value)


def format_standing(percentile: float) -> str:
    """
    Turn a percentile into a short badge.

    A percentile of 0 means the leaderboard size is unknown, so the
    competitor is shown as ranked rather than 'Top 100%'.
    """
    if percentile >= 99.9:
        return "Top 0.1%"
    if percentile >= 99:
        return "Top 1%"
    if percentile > 0:
        return f"Top {100 - percentile:.1f}%"
    return "Ranked"


def event_name(event_id: str) -> str:
    """Display name of an event, falling back to its code."""
    return EVENT_NAMES.get(event_id, event_id)


def is_unknown_region(iso2: Optional[str]) -> bool:
    """True for the "XX" sentinel and anything that is not a two-letter code."""
    return (
        not iso2
        or len(iso2) != 2
        or not iso2.isalpha()
        or iso2.upper() == UNKNOWN_COUNTRY_ISO2
    )


def flag_emoji(iso2: Optional[str]) -> str:
    """Regional-indicator flag for a two-letter country code."""
    if is_unknown_region(iso2):
        return WHITE_FLAG_EMOJI
    return "".join(chr(0x1F1E6 + ord(letter) - ord("A")) for letter in iso2.upper())


def flag_url(iso2: Optional[str]) -> Optional[str]:
    """Small flag image URL, or None when the region is unknown."""
    if is_unknown_region(iso2):
        return None
    return FLAG_IMAGE_URL.format(iso2=iso2.lower())


def continent_emoji(continent: Optional[str]) -> str:
    """Globe emoji facing the given continent."""
    if not continent:
        return DEFAULT_CONTINENT_EMOJI
    return CONTINENT_EMOJIS.get(continent, DEFAULT_CONTINENT_EMOJI)
