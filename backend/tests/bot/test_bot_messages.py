"""
Tests for the bot's message formatting and settings.

Responses are plain dicts shaped like the backend's JSON.
"""

import pytest

from config import Settings
from utils.formatters import format_discipline, format_profile


def level(rank, label):
    return {"rank": rank, "label": label}


@pytest.fixture
def cube_single():
    return {
        "best_formatted": "3.13s",
        "national": level(1, "Top 0.1%"),
        "continental": level(1, "Ranked"),
        "world": level(2, "Top 0.1%"),
    }


# =============================================================================
# Discipline lines
# =============================================================================

class TestFormatDiscipline:
    """Tests for format_discipline."""

    def test_label_per_level(self, cube_single):
        line = format_discipline("Single", cube_single)

        assert line == (
            "Single <b>3.13s</b> · NR 1 <i>(Top 0.1%)</i> · "
            "CR 1 <i>(Ranked)</i> · WR 2 <i>(Top 0.1%)</i>"
        )

    def test_national_and_continental_labels_shown(self):
        line = format_discipline("Average", {
            "best_formatted": "5.22s",
            "national": level(40, "Top 5%"),
            "continental": level(300, "Top 10%"),
            "world": level(2500, "Top 25%"),
        })

        assert "NR 40 <i>(Top 5%)</i>" in line
        assert "CR 300 <i>(Top 10%)</i>" in line
        assert "WR 2500 <i>(Top 25%)</i>" in line

    def test_unranked_level(self):
        """Unknown region: no national rank and no label."""
        line = format_discipline("Single", {
            "best_formatted": "24 moves",
            "national": level(None, None),
            "continental": level(12, None),
            "world": level(5000, "Top 50%"),
        })

        assert "NR —" in line
        assert "CR 12 ·" in line
        assert "WR 5000 <i>(Top 50%)</i>" in line

    def test_no_discipline(self):
        assert format_discipline("Average", None) is None

    def test_label_escaped(self):
        line = format_discipline("Single", {
            "best_formatted": "1.00s",
            "world": level(1, "<Top>"),
        })
        assert "&lt;Top&gt;" in line


class TestFormatProfile:
    """Tests for format_profile."""

    def test_profile_lists_labels(self, cube_single):
        text = format_profile({
            "competitor": {
                "name": "Max <Park>",
                "competitor_id": "2012PARK03",
                "continent": "North America",
                "country": {"name": "United States", "flag_emoji": "🇺🇸"},
            },
            "events": [{"event_name": "3×3 Cube", "single": cube_single, "average": None}],
        })

        assert "<b>Max &lt;Park&gt;</b>" in text
        assert "<b>3×3 Cube</b>" in text
        assert "NR 1 <i>(Top 0.1%)</i>" in text
        assert "CR 1 <i>(Ranked)</i>" in text
        assert "Average" not in text


# =============================================================================
# Settings
# =============================================================================

class TestSettings:
    """Tests for the bot Settings."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", "BACKEND_URL", "REQUEST_TIMEOUT", "DEBUG"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.backend_url == "http://localhost:8000"
        assert settings.request_timeout == 60.0
        assert settings.debug is False

    def test_backend_url_trailing_slash(self):
        settings = Settings(_env_file=None, backend_url="http://api:8000/")
        assert settings.backend_url == "http://api:8000"

    def test_token_fallback(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        assert Settings(_env_file=None).token == "123:abc"

    def test_bot_token_wins(self, monkeypatch):
        monkeypatch.setenv("BOT_TOKEN", "1:first")
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "2:second")
        assert Settings(_env_file=None).token == "1:first"

    def test_missing_token(self):
        with pytest.raises(ValueError, match="BOT_TOKEN"):
            Settings(_env_file=None).token

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, request_timeout=0)
