"""SportsPress payload parsers.

Converts loosely typed SportsPress payloads into core dataclasses.

Standings tables arrive as a mapping of team ID -> record whose numbers
are mostly strings and whose 'form' and 'streak' fields are HTML produced
by the SportsPress formatting plugin, e.g.:

    "strk": '<span style="color:#888888">W4</span>'
    "form": '<div class="sp-form-events"><a ...>W</a> <a ...>L</a></div>'

Per-field coercion policy:
    pos, w, ltwo, pct, pf, pa, diff  -> number, default 0
    gb                               -> number, None when missing/unparseable
    home, road, lten                 -> passthrough string or None
    strk                             -> 'W4' style token or ''
    form                             -> ['W', 'L', ...] in upstream order
"""

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from bblstats.core import GameResult, PlayerSeasonStats, Standings, StandingsRow, TeamScore
from bblstats.utilities.stats import (
    field_goal_percentage,
    free_throw_percentage,
    three_point_percentage,
    to_float,
)
from bblstats.utilities.text import rendered, strip_html

logger = logging.getLogger(__name__)

STREAK_PATTERN = re.compile(r"(?:^|>)\s*([WL]\d+)\s*(?:<|$)")
FORM_PATTERN = re.compile(r">\s*([WL])\s*<")


def parse_streak_html(streak_html: str | None) -> str:
    """Extract the streak token: '<span>W4</span>' -> 'W4'. No match -> ''."""
    if not streak_html or not isinstance(streak_html, str):
        return ""
    match = STREAK_PATTERN.search(streak_html)
    return match.group(1) if match else ""


def parse_form_html(form_html: str | None) -> list[GameResult]:
    """Extract recent results in upstream order: '<a>W</a><a>L</a>' -> ['W', 'L']."""
    if not form_html or not isinstance(form_html, str):
        return []
    return FORM_PATTERN.findall(form_html)


def _to_int(value: Any) -> int:
    return int(to_float(value))


def _to_optional_float(value: Any) -> float | None:
    """Like to_float but keeps 'unknown' distinct from 0."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _to_optional_int(value: Any) -> int | None:
    result = _to_optional_float(value)
    return int(result) if result is not None else None


def _to_optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def parse_standings_row(team_id: str | int, entry: Mapping[str, Any]) -> StandingsRow | None:
    """Build one row, or None when the entry is not standings-worthy.

    Excluded: missing/zero position, missing name, or a 0-0 record.
    The header row SportsPress stores under key "0" fails the position check.
    """
    if not isinstance(entry, Mapping):
        return None

    position = _to_int(entry.get("pos"))
    name = strip_html(entry.get("name")) if isinstance(entry.get("name"), str) else ""
    if position <= 0 or not name:
        return None

    wins = _to_int(entry.get("w"))
    losses = _to_int(entry.get("ltwo"))
    if wins == 0 and losses == 0:
        return None

    return StandingsRow(
        position=position,
        team_name=name,
        team_id=_to_int(team_id),
        wins=wins,
        losses=losses,
        win_pct=to_float(entry.get("pct")),
        games_behind=_to_optional_float(entry.get("gb")),
        points_for=_to_int(entry.get("pf")),
        points_against=_to_int(entry.get("pa")),
        differential=_to_int(entry.get("diff")),
        home_record=_to_optional_str(entry.get("home")),
        away_record=_to_optional_str(entry.get("road")),
        last_10=_to_optional_str(entry.get("lten")),
        streak=parse_streak_html(entry.get("strk")),
        form=parse_form_html(entry.get("form")),
    )


def parse_standings_table(table: Mapping[str, Any] | None) -> list[StandingsRow]:
    """Parse one SportsPress table into rows sorted by position.

    A table without 'data' yields an empty list.
    """
    if not table:
        return []
    data = table.get("data")
    if not data or not isinstance(data, Mapping):
        return []

    rows = []
    for team_id, entry in data.items():
        row = parse_standings_row(team_id, entry)
        if row is not None:
            rows.append(row)

    rows.sort(key=lambda r: r.position)
    logger.debug(
        "[STANDINGS] Parsed %d of %d entries for table %s", len(rows), len(data), table.get("id")
    )
    return rows


def parse_standings_tables(tables: Iterable[Mapping[str, Any]]) -> list[list[StandingsRow]]:
    """Parse each table independently, preserving input order. Tables are never merged."""
    return [parse_standings_table(table) for table in tables]


def to_standings(
    table: Mapping[str, Any] | None, default_title: str = "Current Season"
) -> Standings:
    """Parse a table together with its display title."""
    title = rendered(table.get("title")) if table else ""
    return Standings(
        table_id=_to_optional_int(table.get("id")) if table else None,
        title=title or default_title,
        rows=parse_standings_table(table),
    )


# =============================================================================
# Players
# =============================================================================


def season_stats_payload(player: Mapping[str, Any], league_id: int, season_id: int) -> dict | None:
    """Raw statistics block for one league/season, or None if absent.

    SportsPress nests statistics as {league_id: {season_id: {...}}} with string keys.
    """
    statistics = player.get("statistics")
    if not isinstance(statistics, Mapping):
        return None
    league_stats = statistics.get(str(league_id))
    if not isinstance(league_stats, Mapping):
        return None
    season_stats = league_stats.get(str(season_id))
    return dict(season_stats) if isinstance(season_stats, Mapping) else None


def parse_player_season_stats(stats: Mapping[str, Any]) -> PlayerSeasonStats:
    """Coerce a raw statistics block; shooting splits are derived when not supplied."""
    fg_pct = _to_optional_float(stats.get("fg_pct"))
    if fg_pct is None:
        fg_pct = field_goal_percentage(
            _to_optional_float(stats.get("fgm")), _to_optional_float(stats.get("fga"))
        )
    three_pct = _to_optional_float(stats.get("3p_pct"))
    if three_pct is None:
        three_pct = three_point_percentage(
            _to_optional_float(stats.get("3pm")), _to_optional_float(stats.get("3pa"))
        )
    ft_pct = _to_optional_float(stats.get("ft_pct"))
    if ft_pct is None:
        ft_pct = free_throw_percentage(
            _to_optional_float(stats.get("ftm")), _to_optional_float(stats.get("fta"))
        )

    return PlayerSeasonStats(
        games=_to_int(stats.get("g")),
        points=to_float(stats.get("pts")),
        ppg=to_float(stats.get("ppg")),
        apg=to_float(stats.get("apg")),
        rpg=to_float(stats.get("rpg")),
        spg=to_float(stats.get("spg")),
        bpg=to_float(stats.get("bpg")),
        eff=to_float(stats.get("eff")),
        fg_pct=fg_pct,
        three_pct=three_pct,
        ft_pct=ft_pct,
    )


def games_played(player: Mapping[str, Any], league_id: int, season_id: int) -> int:
    stats = season_stats_payload(player, league_id, season_id)
    return _to_int(stats.get("g")) if stats else 0


def featured_image_url(resource: Mapping[str, Any], size: str | None = None) -> str | None:
    """Embedded featured media URL (player photo, team logo).

    Prefers the requested size, falls back to the full source_url.
    """
    embedded = resource.get("_embedded")
    if not isinstance(embedded, Mapping):
        return None
    media = embedded.get("wp:featuredmedia")
    if not media or not isinstance(media, list) or not isinstance(media[0], Mapping):
        return None

    first = media[0]
    if size:
        sizes = (first.get("media_details") or {}).get("sizes") or {}
        sized = sizes.get(size)
        if isinstance(sized, Mapping) and sized.get("source_url"):
            return sized["source_url"]
    return first.get("source_url")


# =============================================================================
# Events
# =============================================================================

# Period keys in an event's per-team results, in play order
QUARTER_KEYS = ("one", "two", "three", "four", "ot")


def parse_event_team_ids(event: Mapping[str, Any]) -> list[int]:
    """Team IDs listed on an event, in upstream (home, away) order.

    Entries that are not positive numbers are skipped.
    """
    teams = event.get("teams")
    if not isinstance(teams, list):
        return []
    team_ids = []
    for value in teams:
        team_id = _to_optional_int(value)
        if team_id is not None and team_id > 0:
            team_ids.append(team_id)
    return team_ids


def parse_match_scores(event: Mapping[str, Any], team_ids: Iterable[int]) -> list[TeamScore]:
    """Final points and per-quarter scores for each team, in the given order.

    SportsPress keeps them under results[team_id] as strings, e.g.
    {"one": "20", "two": "25", ..., "points": "85", "outcome": ["win"]}.
    Upcoming events have no results; their scores are all None.
    """
    results = event.get("results")
    if not isinstance(results, Mapping):
        results = {}

    scores = []
    for team_id in team_ids:
        result = results.get(str(team_id))
        if not isinstance(result, Mapping):
            result = {}
        quarters = {key: _to_optional_int(result[key]) for key in QUARTER_KEYS if key in result}
        scores.append(
            TeamScore(
                team_id=team_id,
                points=_to_optional_int(result.get("points")),
                quarters=quarters,
            )
        )
    return scores
