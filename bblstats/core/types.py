"""Core data types.

Dataclasses for records derived from upstream SportsPress payloads.
Everything here is recomputed on read; nothing is persisted.
"""

from dataclasses import dataclass, field
from typing import Literal

GameResult = Literal["W", "L"]


@dataclass
class StandingsRow:
    """One team's line in a standings table."""

    position: int
    team_name: str
    team_id: int
    wins: int
    losses: int
    win_pct: float
    games_behind: float | None  # None = unknown, 0.0 = leader
    points_for: int
    points_against: int
    differential: int
    home_record: str | None = None
    away_record: str | None = None
    last_10: str | None = None
    streak: str = ""
    form: list[GameResult] = field(default_factory=list)


@dataclass
class Standings:
    """A parsed standings table with its display title."""

    table_id: int | None
    title: str
    rows: list[StandingsRow]


@dataclass
class PlayerSeasonStats:
    """Per-game averages for one league/season, coerced from upstream strings."""

    games: int = 0
    points: float = 0.0
    ppg: float = 0.0
    apg: float = 0.0
    rpg: float = 0.0
    spg: float = 0.0
    bpg: float = 0.0
    eff: float = 0.0
    fg_pct: float | None = None
    three_pct: float | None = None
    ft_pct: float | None = None


@dataclass
class LeaderboardEntry:
    """A player row on the leaderboard."""

    player_id: int
    name: str
    slug: str
    team_id: int | None
    number: str
    position: str | None
    photo_url: str | None
    stats: PlayerSeasonStats


@dataclass
class TeamStats:
    """Season totals summed over a team's active roster."""

    total_points: float
    total_assists: int
    total_rebounds: int
    avg_points_per_game: float
    player_count: int


@dataclass
class TeamScore:
    """One side of a match box score. None = not reported yet."""

    team_id: int
    points: int | None = None
    quarters: dict[str, int | None] = field(default_factory=dict)
