"""
Bot formatters - build Telegram HTML messages from backend responses.

Results, labels and flags arrive pre-formatted from the backend; this
module only lays them out and escapes user-visible names.
"""

from typing import Any, Optional

from aiogram.utils.text_decorations import html_decoration

# Telegram rejects longer messages
MAX_MESSAGE_LENGTH = 4096

LEVELS = [("national", "NR"), ("continental", "CR"), ("world", "WR")]

WINNER_MARKS = {
    "first": "◀",
    "second": "▶",
    "tie": "=",
}


def quote(text: Optional[str]) -> str:
    return html_decoration.quote(text or "")


def format_competitor_header(competitor: dict[str, Any]) -> str:
    """
    Name, flag, country and continent.

    Example:
        <b>Max Park</b> 🇺🇸 United States
        🌎 North America · 2012PARK03
    """
    country = competitor.get("country") or {}
    continent = competitor.get("continent") or "Unknown continent"

    return (
        f"<b>{quote(competitor.get('name'))}</b> "
        f"{country.get('flag_emoji', '')} {quote(country.get('name'))}\n"
        f"{competitor.get('continent_emoji', '')} {quote(continent)} · "
        f"<code>{quote(competitor.get('competitor_id'))}</code>"
    )


def _format_level(level: dict[str, Any], abbreviation: str) -> str:
    """Rank with its label, e.g. 'NR 1 (Top 1%)'."""
    rank = level.get("rank")
    if not rank:
        return f"{abbreviation} —"
    label = level.get("label")
    if label:
        return f"{abbreviation} {rank} <i>({quote(label)})</i>"
    return f"{abbreviation} {rank}"


def format_discipline(title: str, discipline: Optional[dict[str, Any]]) -> Optional[str]:
    """
    One discipline line: best result and NR/CR/WR ranks with their labels.

    Example: 'Single 3.13s · NR 1 (Top 0.1%) · CR 1 (Ranked) · WR 2 (Top 0.1%)'
    """
    if not discipline:
        return None

    parts = [f"{title} <b>{quote(discipline.get('best_formatted'))}</b>"]
    parts.extend(
        _format_level(discipline.get(key) or {}, abbreviation)
        for key, abbreviation in LEVELS
    )

    return " · ".join(parts)


def format_profile(data: dict[str, Any]) -> str:
    """Full /stats message for a competitor profile response."""
    lines = [format_competitor_header(data["competitor"]), ""]

    for event in data.get("events", []):
        lines.append(f"<b>{quote(event.get('event_name'))}</b>")
        for title, key in (("Single", "single"), ("Average", "average")):
            line = format_discipline(title, event.get(key))
            if line:
                lines.append(line)
        lines.append("")

    return truncate("\n".join(lines).strip())


def _side(side: dict[str, Any], key: str) -> str:
    result = side.get(key)
    if not result:
        return "—"
    rank = side.get(f"{key}_world_rank")
    return f"{quote(result)} (WR {rank})" if rank else quote(result)


def format_duel(duel: dict[str, Any]) -> list[str]:
    """
    Lines for one event of a comparison.

    The mark points at the winner; events held by one side only have none.
    """
    lines = [f"<b>{quote(duel.get('event_name'))}</b>"]
    first = duel.get("first") or {}
    second = duel.get("second") or {}

    for title, key in (("Single", "single"), ("Average", "average")):
        if not first.get(key) and not second.get(key):
            continue
        mark = WINNER_MARKS.get(duel.get(f"{key}_winner"), "")
        parts = [f"{title}:", _side(first, key), mark, _side(second, key)]
        lines.append(" ".join(part for part in parts if part))
    return lines


def format_comparison(data: dict[str, Any]) -> str:
    """Full /compare message: both competitors, both scores, per-event duels."""
    first = data["first"]
    second = data["second"]
    fair = data["fair"]
    unfair = data["unfair"]

    lines = [
        "⚔️ <b>Head to head</b>",
        "",
        format_competitor_header(first),
        "vs",
        format_competitor_header(second),
        "",
        f"🤝 <b>Shared events</b> ({len(fair.get('events', []))}): "
        f"{fair['first_points']} – {fair['second_points']}",
        f"🌍 <b>All events</b> ({len(unfair.get('events', []))}): "
        f"{unfair['first_points']} – {unfair['second_points']}",
        "",
    ]

    for duel in data.get("duels", []):
        lines.extend(format_duel(duel))
        lines.append("")

    return truncate("\n".join(lines).strip())


def truncate(text: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Cut at a line boundary so no HTML tag is split."""
    if len(text) <= limit:
        return text

    cut = text.rfind("\n", 0, limit - 2)
    return text[:cut] + "\n…"
