"""Team roster summaries.

Season totals for a team are not served by SportsPress; they are summed
from the roster's per-player statistics for one league/season. Assists
and rebounds are only available as per-game averages, so totals are
reconstructed as round(avg * games) per player.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from bblstats.core import TeamStats
from bblstats.providers.sportspress.parsers import season_stats_payload
from bblstats.utilities.stats import to_float


def _season_points(player: Mapping[str, Any], league_id: int, season_id: int) -> float:
    stats = season_stats_payload(player, league_id, season_id) or {}
    return to_float(stats.get("pts"))


def summarize_roster(
    roster: Sequence[Mapping[str, Any]], league_id: int, season_id: int
) -> TeamStats | None:
    """Team totals over the roster, or None for an empty roster.

    Players without a statistics block for the season still count
    towards player_count.
    """
    if not roster:
        return None

    total_points = 0.0
    total_assists = 0
    total_rebounds = 0
    total_games = 0
    for player in roster:
        stats = season_stats_payload(player, league_id, season_id)
        if not stats:
            continue
        games = int(to_float(stats.get("g")))
        total_points += to_float(stats.get("pts"))
        total_assists += round(to_float(stats.get("apg")) * games)
        total_rebounds += round(to_float(stats.get("rpg")) * games)
        total_games += games

    return TeamStats(
        total_points=total_points,
        total_assists=total_assists,
        total_rebounds=total_rebounds,
        avg_points_per_game=total_points / total_games if total_games > 0 else 0.0,
        player_count=len(roster),
    )


def sort_roster_by_points(
    roster: Sequence[Mapping[str, Any]], league_id: int, season_id: int
) -> list[Mapping[str, Any]]:
    """Roster ordered by season points, highest first. Ties keep upstream order."""
    return sorted(roster, key=lambda p: _season_points(p, league_id, season_id), reverse=True)
