"""Derived statistics.

Pure arithmetic on upstream fields. Functions that can be undefined
(zero attempts, missing inputs) return None so callers can tell
"did not attempt" apart from "0% accuracy".

Display formatting lives in bblstats.utilities.formatters.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from bblstats.core import GameResult

T = TypeVar("T", bound=Mapping[str, Any])


def win_percentage(wins: int, losses: int) -> float:
    """Win percentage as a fraction. 0-0 record returns 0."""
    total = wins + losses
    if total == 0:
        return 0.0
    return wins / total


def games_behind(leader_wins: int, leader_losses: int, team_wins: int, team_losses: int) -> float:
    """Games behind the leader: half the sum of win and loss differences."""
    return ((leader_wins - team_wins) + (team_losses - leader_losses)) / 2


def _made_over_attempted(made: float | None, attempted: float | None) -> float | None:
    if made is None or attempted is None or attempted == 0:
        return None
    return made / attempted


def field_goal_percentage(fgm: float | None, fga: float | None) -> float | None:
    return _made_over_attempted(fgm, fga)


def three_point_percentage(threepm: float | None, threepa: float | None) -> float | None:
    return _made_over_attempted(threepm, threepa)


def free_throw_percentage(ftm: float | None, fta: float | None) -> float | None:
    return _made_over_attempted(ftm, fta)


def true_shooting_percentage(pts: float, fga: float, fta: float) -> float | None:
    """TS% = PTS / (2 * (FGA + 0.44 * FTA))."""
    denominator = 2 * (fga + 0.44 * fta)
    if denominator == 0:
        return None
    return pts / denominator


def effective_fg_percentage(fgm: float, threepm: float, fga: float) -> float | None:
    """eFG% = (FGM + 0.5 * 3PM) / FGA."""
    if fga == 0:
        return None
    return (fgm + 0.5 * threepm) / fga


def efficiency(stats: Mapping[str, Any]) -> float:
    """Simplified efficiency rating: positive plays minus misses and turnovers.

    Missing keys count as 0. Never negative.
    """

    def val(key: str) -> float:
        return to_float(stats.get(key))

    positive = (
        val("pts") + val("apg") + val("rpg") + val("spg") + val("bpg") + val("fgm") + val("ftm")
    )
    negative = val("tov") + (val("fga") - val("fgm")) + (val("fta") - val("ftm"))
    return max(0.0, positive - negative)


def to_float(value: Any, default: float = 0.0) -> float:
    """Best-effort numeric coercion for loosely typed API values."""
    if value is None or value == "" or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def sort_players_by_stat(players: Sequence[T], stat_key: str, descending: bool = True) -> list[T]:
    """Sort records by a numeric field; unparseable values sort as 0."""
    return sorted(players, key=lambda p: to_float(p.get(stat_key)), reverse=descending)


def top_players(players: Sequence[T], stat_key: str, limit: int = 10) -> list[T]:
    return sort_players_by_stat(players, stat_key)[:limit]


def meets_minimum_games(games_played: int, min_games: int) -> bool:
    return games_played >= min_games


def recent_form(results: Sequence[GameResult], limit: int = 5) -> list[GameResult]:
    """Last `limit` results, keeping their original order."""
    if limit <= 0:
        return []
    return list(results[-limit:])


def average(numbers: Sequence[float]) -> float:
    if not numbers:
        return 0.0
    return sum(numbers) / len(numbers)
