"""Core types."""

from bblstats.core.types import (
    GameResult,
    LeaderboardEntry,
    PlayerSeasonStats,
    Standings,
    StandingsRow,
    TeamScore,
    TeamStats,
)

__all__ = [
    "GameResult",
    "LeaderboardEntry",
    "PlayerSeasonStats",
    "Standings",
    "StandingsRow",
    "TeamScore",
    "TeamStats",
]
