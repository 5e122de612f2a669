"""Player leaderboard.

Builds leaderboard rows from raw SportsPress players for one league/season:
only players with at least one game in that season are listed, optionally
narrowed by an accent-insensitive name search and a minimum games filter,
then ordered by a per-game stat.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from bblstats.core import LeaderboardEntry
from bblstats.providers.sportspress.parsers import (
    featured_image_url,
    parse_player_season_stats,
    season_stats_payload,
)
from bblstats.utilities.stats import meets_minimum_games
from bblstats.utilities.text import normalize_for_search, rendered

logger = logging.getLogger(__name__)

LeaderboardStat = Literal["ppg", "apg", "rpg", "spg", "bpg", "eff", "points", "games"]
LEADERBOARD_STATS: tuple[str, ...] = ("ppg", "apg", "rpg", "spg", "bpg", "eff", "points", "games")

PHOTO_SIZE = "sportspress-fit-icon"


def _first_int(values: Any) -> int | None:
    if isinstance(values, list) and values:
        try:
            return int(values[0])
        except (TypeError, ValueError):
            return None
    return None


def _position_name(player: Mapping[str, Any]) -> str | None:
    position = player.get("position")
    if isinstance(position, str) and position:
        return position
    return None


def to_leaderboard_entry(
    player: Mapping[str, Any], league_id: int, season_id: int
) -> LeaderboardEntry | None:
    """Leaderboard row for a player, or None without games in this season."""
    stats_payload = season_stats_payload(player, league_id, season_id)
    if not stats_payload:
        return None
    stats = parse_player_season_stats(stats_payload)
    if stats.games <= 0:
        return None

    return LeaderboardEntry(
        player_id=int(player.get("id") or 0),
        name=rendered(player.get("title")),
        slug=str(player.get("slug") or ""),
        team_id=_first_int(player.get("current_teams")),
        number=str(player.get("number") or ""),
        position=_position_name(player),
        photo_url=player.get("photo") or featured_image_url(player, PHOTO_SIZE),
        stats=stats,
    )


def build_leaderboard(
    players: Iterable[Mapping[str, Any]],
    league_id: int,
    season_id: int,
    search: str | None = None,
    min_games: int = 0,
    sort_by: str = "ppg",
    limit: int | None = None,
) -> list[LeaderboardEntry]:
    """Filter and rank players.

    Args:
        players: Raw SportsPress player records
        league_id: League whose statistics are used
        season_id: Season whose statistics are used
        search: Case- and accent-insensitive substring of the player name
        min_games: Minimum games played (0 = no filter)
        sort_by: One of LEADERBOARD_STATS, sorted descending
        limit: Max rows to return (None = all)

    Returns:
        Leaderboard rows, best first
    """
    if sort_by not in LEADERBOARD_STATS:
        raise ValueError(f"Unknown leaderboard stat: {sort_by}")

    needle = normalize_for_search(search)
    entries = []
    for player in players:
        entry = to_leaderboard_entry(player, league_id, season_id)
        if entry is None:
            continue
        if needle and needle not in normalize_for_search(entry.name):
            continue
        if min_games > 0 and not meets_minimum_games(entry.stats.games, min_games):
            continue
        entries.append(entry)

    entries.sort(key=lambda e: getattr(e.stats, sort_by), reverse=True)
    if limit is not None:
        entries = entries[:limit]

    logger.debug("[LEADERBOARD] %d players (sort=%s, search=%r)", len(entries), sort_by, search)
    return entries
