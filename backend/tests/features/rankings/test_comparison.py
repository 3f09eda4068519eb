"""
Tests for head-to-head comparison.

Fair tally: shared events only. Unfair tally: all events, presence
beats absence.
"""

import copy

import pytest

from cubify.features.rankings import Winner, better, compare_points, normalize

from conftest import person_payload, rank_entry


def competitor(competitor_id="2010AAAA01", singles=None, averages=None):
    return normalize(person_payload(
        competitor_id=competitor_id,
        singles=singles or [],
        averages=averages or [],
    ))


# =============================================================================
# Test better()
# =============================================================================

class TestBetter:
    """Per-discipline comparator."""

    @pytest.mark.parametrize("first,second,expected", [
        (1, 2, Winner.FIRST),
        (10, 3, Winner.SECOND),
        (7, 7, Winner.TIE),
        (None, None, Winner.TIE),
        (5, None, Winner.FIRST),
        (None, 5, Winner.SECOND),
        (0, 4, Winner.SECOND),
    ])
    def test_outcomes(self, first, second, expected):
        assert better(first, second) == expected


# =============================================================================
# Test compare_points()
# =============================================================================

class TestComparePoints:
    """Fair and unfair tallies."""

    def test_disjoint_events(self):
        """A holds only 333, B holds only 444: nothing fair, one point each unfair."""
        a = competitor("2010AAAA01", singles=[rank_entry("333", 900, world=5)])
        b = competitor("2010BBBB01", singles=[rank_entry("444", 4000, world=3)])

        result = compare_points(a, b)

        assert (result.fair.first, result.fair.second) == (0, 0)
        assert result.fair.events == ()
        assert (result.unfair.first, result.unfair.second) == (1, 1)
        assert result.unfair.events == ("333", "444")

    def test_shared_event_split(self):
        """A wins the single, B wins the average."""
        a = competitor(
            singles=[rank_entry("333", 500, world=10)],
            averages=[rank_entry("333", 700, world=50)],
        )
        b = competitor(
            "2010BBBB01",
            singles=[rank_entry("333", 550, world=20)],
            averages=[rank_entry("333", 650, world=30)],
        )

        result = compare_points(a, b)

        assert (result.fair.first, result.fair.second) == (1, 1)
        assert (result.unfair.first, result.unfair.second) == (1, 1)
        assert result.duels[0].single_winner == Winner.FIRST
        assert result.duels[0].average_winner == Winner.SECOND

    def test_unfair_rewards_extra_events(self):
        """Only-held events count once per discipline held."""
        a = competitor(
            singles=[rank_entry("333", 500, world=10), rank_entry("555", 5000, world=100)],
            averages=[rank_entry("555", 5500, world=90)],
        )
        b = competitor("2010BBBB01", singles=[rank_entry("333", 450, world=5)])

        result = compare_points(a, b)

        assert (result.fair.first, result.fair.second) == (0, 1)
        assert result.fair.events == ("333",)
        assert (result.unfair.first, result.unfair.second) == (2, 1)
        assert result.unfair.events == ("333", "555")

    def test_discipline_held_by_one_side_is_not_fair_contested(self):
        """In a shared event, an average only one side has scores nothing."""
        a = competitor(
            singles=[rank_entry("333bf", 2000, world=40)],
            averages=[rank_entry("333bf", 2500, world=30)],
        )
        b = competitor("2010BBBB01", singles=[rank_entry("333bf", 1800, world=20)])

        result = compare_points(a, b)

        assert (result.fair.first, result.fair.second) == (0, 1)
        assert (result.unfair.first, result.unfair.second) == (0, 1)
        assert result.duels[0].average_winner is None

    def test_missing_world_rank_loses(self):
        a = competitor(singles=[rank_entry("clock", 400, world=None)])
        b = competitor("2010BBBB01", singles=[rank_entry("clock", 800, world=900)])

        result = compare_points(a, b)

        assert (result.fair.first, result.fair.second) == (0, 1)

    def test_events_sorted(self):
        a = competitor(singles=[rank_entry("sq1", 900, world=5), rank_entry("222", 100, world=9)])
        b = competitor("2010BBBB01", singles=[rank_entry("333", 600, world=3)])

        result = compare_points(a, b)

        assert result.unfair.events == ("222", "333", "sq1")
        assert [d.event_id for d in result.duels] == ["222", "333", "sq1"]

    def test_fair_events_are_shared(self, max_park_payload):
        a = normalize(max_park_payload)
        b = competitor(
            "2010BBBB01",
            singles=[rank_entry("444", 2500, world=40), rank_entry("pyram", 150, world=2)],
        )

        result = compare_points(a, b)

        for event_id in result.fair.events:
            assert event_id in a.personal_records
            assert event_id in b.personal_records
        assert result.fair.events == ("444",)

    def test_against_identical_copy(self, max_park_payload):
        """Comparing a competitor with a copy of themselves is all ties."""
        a = normalize(max_park_payload)
        b = normalize(copy.deepcopy(max_park_payload))

        result = compare_points(a, b)

        assert result.fair.first == result.fair.second == 0
        assert result.unfair.first == result.unfair.second == 0
        assert all(d.single_winner == Winner.TIE for d in result.duels)

    def test_swapping_sides_mirrors_points(self):
        a = competitor(singles=[rank_entry("333", 500, world=10), rank_entry("777", 9000, world=40)])
        b = competitor("2010BBBB01", singles=[rank_entry("333", 450, world=5)])

        forward = compare_points(a, b)
        backward = compare_points(b, a)

        assert (forward.fair.first, forward.fair.second) == (backward.fair.second, backward.fair.first)
        assert (forward.unfair.first, forward.unfair.second) == (backward.unfair.second, backward.unfair.first)

    def test_inputs_unchanged(self, max_park_payload):
        a = normalize(max_park_payload)
        b = competitor("2010BBBB01", singles=[rank_entry("333", 450, world=5)])
        a_before, b_before = dict(a.personal_records), dict(b.personal_records)

        compare_points(a, b)

        assert dict(a.personal_records) == a_before
        assert dict(b.personal_records) == b_before
