"""Tests for SportsPress standings and event parsing."""

import copy

import pytest
from conftest import make_table

from bblstats.providers.sportspress.parsers import (
    parse_event_team_ids,
    parse_form_html,
    parse_match_scores,
    parse_standings_row,
    parse_standings_table,
    parse_standings_tables,
    parse_streak_html,
    to_standings,
)

LAKERS = {
    "pos": 1,
    "name": "Lakers",
    "w": "10",
    "ltwo": "2",
    "pf": "850",
    "pa": "800",
    "diff": "50",
    "strk": "<span>W4</span>",
    "form": "<a>W</a><a>W</a><a>L</a><a>W</a><a>W</a>",
}


def _assert_table_properties(rows):
    for row in rows:
        assert row.position > 0
        assert row.wins + row.losses > 0
    positions = [row.position for row in rows]
    assert positions == sorted(positions)


# ---------- HTML fragments ----------


class TestStreak:
    def test_extracts_token_from_span(self):
        assert parse_streak_html('<span style="color:#888888">W4</span>') == "W4"

    def test_loss_streak(self):
        assert parse_streak_html("<span>L12</span>") == "L12"

    def test_bare_token(self):
        assert parse_streak_html("W2") == "W2"

    def test_lowercase_letter_not_matched(self):
        assert parse_streak_html("<span>w4</span>") == ""

    @pytest.mark.parametrize("value", [None, "", "<span></span>", "<span>-</span>", 5])
    def test_no_token_gives_empty_string(self, value):
        assert parse_streak_html(value) == ""


class TestForm:
    def test_keeps_upstream_order(self):
        html = (
            '<div class="sp-form-events">'
            '<a href="/event/1" class="sp-form-event-link sp-form-win">W</a> '
            '<a href="/event/2" class="sp-form-event-link sp-form-loss">L</a> '
            '<a href="/event/3" class="sp-form-event-link sp-form-win">W</a>'
            "</div>"
        )
        assert parse_form_html(html) == ["W", "L", "W"]

    def test_ignores_other_text(self):
        assert parse_form_html("<a>Win</a><a>L</a><a>D</a>") == ["L"]

    @pytest.mark.parametrize("value", [None, "", "<div></div>", "WLW"])
    def test_empty_or_unmatched(self, value):
        assert parse_form_html(value) == []


# ---------- Single rows ----------


class TestRow:
    def test_full_entry(self):
        row = parse_standings_row("14", LAKERS)
        assert row.position == 1
        assert row.team_name == "Lakers"
        assert row.team_id == 14
        assert row.wins == 10
        assert row.losses == 2
        assert row.points_for == 850
        assert row.points_against == 800
        assert row.differential == 50
        assert row.streak == "W4"
        assert row.form == ["W", "W", "L", "W", "W"]

    def test_unknown_numbers_default_to_zero(self):
        row = parse_standings_row("3", {"pos": "4", "name": "Split", "w": "5", "pf": "n/a"})
        assert row.losses == 0
        assert row.points_for == 0
        assert row.points_against == 0
        assert row.differential == 0
        assert row.win_pct == 0.0

    def test_games_behind_left_unknown(self):
        row = parse_standings_row("3", {**LAKERS, "gb": "-"})
        assert row.games_behind is None
        row = parse_standings_row("3", LAKERS)
        assert row.games_behind is None

    def test_games_behind_zero_is_kept(self):
        row = parse_standings_row("3", {**LAKERS, "gb": 0})
        assert row.games_behind == 0.0

    def test_optional_records_pass_through(self):
        row = parse_standings_row(
            "3", {**LAKERS, "home": "6-1", "road": "4-1", "lten": "8-2", "pct": "0.833"}
        )
        assert row.home_record == "6-1"
        assert row.away_record == "4-1"
        assert row.last_10 == "8-2"
        assert row.win_pct == pytest.approx(0.833)

    def test_missing_strk_and_form(self):
        row = parse_standings_row("3", {"pos": 2, "name": "Zadar", "w": "1", "ltwo": "1"})
        assert row.streak == ""
        assert row.form == []
        assert row.home_record is None

    def test_non_finite_numbers_fall_back(self):
        row = parse_standings_row(
            "7", {**LAKERS, "w": "Infinity", "pf": "1e999", "pct": "inf", "gb": "-Infinity"}
        )
        assert row.wins == 0
        assert row.losses == 2
        assert row.points_for == 0
        assert row.win_pct == 0.0
        assert row.games_behind is None

    def test_non_finite_wins_and_losses_excluded(self):
        table = {"data": {"7": {"pos": 1, "name": "Cibona", "w": "Infinity", "ltwo": "1e999"}}}
        assert parse_standings_table(table) == []

    def test_name_entities_decoded(self):
        row = parse_standings_row("3", {**LAKERS, "name": "Cibona &amp; Co"})
        assert row.team_name == "Cibona & Co"


class TestExclusion:
    def test_zero_position_and_empty_name(self):
        assert parse_standings_row("1", {"pos": 0, "name": "", "w": "0", "ltwo": "0"}) is None

    def test_no_games_played(self):
        entry = {"pos": 5, "name": "Dubrava", "w": "0", "ltwo": "0"}
        assert parse_standings_row("1", entry) is None

    def test_missing_position(self):
        assert parse_standings_row("1", {"name": "Dubrava", "w": "3", "ltwo": "1"}) is None

    def test_missing_name(self):
        assert parse_standings_row("1", {"pos": 1, "w": "3", "ltwo": "1"}) is None

    def test_header_row(self):
        header = {"name": "Team", "pos": "Pos", "w": "W", "ltwo": "L"}
        assert parse_standings_row("0", header) is None

    def test_non_mapping_entry(self):
        assert parse_standings_row("1", "garbage") is None


# ---------- Tables ----------


class TestTable:
    def test_sorted_by_position_and_filtered(self):
        rows = parse_standings_table(make_table())
        assert [r.team_name for r in rows] == ["Cibona", "Zadar"]
        assert [r.team_id for r in rows] == [7, 12]
        _assert_table_properties(rows)

    def test_missing_data_is_empty(self):
        assert parse_standings_table({"id": 1}) == []
        assert parse_standings_table({"id": 1, "data": None}) == []
        assert parse_standings_table(None) == []

    def test_idempotent(self):
        table = make_table()
        snapshot = copy.deepcopy(table)
        assert parse_standings_table(table) == parse_standings_table(table)
        assert table == snapshot

    def test_input_order_does_not_matter(self):
        table = make_table()
        reversed_table = {**table, "data": dict(reversed(list(table["data"].items())))}
        assert parse_standings_table(table) == parse_standings_table(reversed_table)

    def test_scenario_row(self):
        rows = parse_standings_table(
            {"data": {"14": LAKERS, "2": {"pos": 0, "name": "", "w": "0", "ltwo": "0"}}}
        )
        assert len(rows) == 1
        assert rows[0].team_name == "Lakers"
        assert rows[0].form == ["W", "W", "L", "W", "W"]

    def test_to_standings_title(self):
        standings = to_standings(make_table(table_id=9, title="BBL 2025/2026"))
        assert standings.table_id == 9
        assert standings.title == "BBL 2025/2026"
        assert len(standings.rows) == 2

    def test_to_standings_non_numeric_id(self):
        standings = to_standings({**make_table(), "id": "latest"})
        assert standings.table_id is None
        assert len(standings.rows) == 2

    def test_to_standings_without_table(self):
        standings = to_standings(None)
        assert standings.title == "Current Season"
        assert standings.rows == []


class TestMultipleTables:
    def test_three_tables_parsed_independently(self):
        tables = [
            make_table(1),
            {"id": 2, "data": {"14": LAKERS}},
            {"id": 3},
        ]
        result = parse_standings_tables(tables)
        assert len(result) == 3
        assert [len(rows) for rows in result] == [2, 1, 0]
        for rows in result:
            _assert_table_properties(rows)

    def test_empty_input(self):
        assert parse_standings_tables([]) == []


# ---------- Events ----------


class TestEventTeams:
    def test_ids_in_upstream_order(self):
        assert parse_event_team_ids({"teams": [12, "7"]}) == [12, 7]

    def test_bad_entries_skipped(self):
        assert parse_event_team_ids({"teams": ["abc", "", None, 0, "1e999", 7]}) == [7]

    @pytest.mark.parametrize("teams", [None, {}, "7,12"])
    def test_missing_or_wrong_shape(self, teams):
        assert parse_event_team_ids({"teams": teams}) == []


class TestMatchScores:
    event = {
        "results": {
            "0": {"one": "1", "points": "T"},
            "7": {"one": "20", "two": "25", "ot": "", "points": "85", "outcome": ["win"]},
            "12": {"one": "19", "points": "80"},
        }
    }

    def test_points_and_quarters(self):
        home, away = parse_match_scores(self.event, [7, 12])
        assert home.points == 85
        assert home.quarters == {"one": 20, "two": 25, "ot": None}
        assert away.points == 80
        assert away.quarters == {"one": 19}

    def test_team_without_results(self):
        (score,) = parse_match_scores(self.event, [30])
        assert score.team_id == 30
        assert score.points is None
        assert score.quarters == {}

    def test_results_not_a_mapping(self):
        scores = parse_match_scores({"results": []}, [7, 12])
        assert [s.points for s in scores] == [None, None]
