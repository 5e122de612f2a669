"""Pydantic models for API responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# =============================================================================
# Standings
# =============================================================================


class StandingsRowResponse(BaseModel):
    """One team's standings line."""

    position: int
    team_name: str
    team_id: int
    wins: int
    losses: int
    win_pct: float
    games_behind: float | None
    points_for: int
    points_against: int
    differential: int
    home_record: str | None
    away_record: str | None
    last_10: str | None
    streak: str
    form: list[str]
    # Display strings
    record: str
    win_pct_display: str


class StandingsResponse(BaseModel):
    table_id: int | None
    title: str
    rows: list[StandingsRowResponse]


# =============================================================================
# Players
# =============================================================================


class PlayerStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    games: int
    points: float
    ppg: float
    apg: float
    rpg: float
    spg: float
    bpg: float
    eff: float
    fg_pct: float | None
    three_pct: float | None
    ft_pct: float | None


class LeaderboardEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    player_id: int
    name: str
    slug: str
    team_id: int | None
    number: str
    position: str | None
    photo_url: str | None
    stats: PlayerStatsResponse


class LeaderboardResponse(BaseModel):
    count: int
    season_id: int
    league_id: int
    players: list[LeaderboardEntryResponse]


# =============================================================================
# Teams / matches (upstream records plus derived summaries)
# =============================================================================


class TeamStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_points: float
    total_assists: int
    total_rebounds: int
    avg_points_per_game: float
    player_count: int


class TeamDetailResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team: dict[str, Any]
    roster: list[dict[str, Any]]
    stats: TeamStatsResponse | None = None


class TeamScoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team_id: int
    points: int | None
    quarters: dict[str, int | None]


class MatchDetailResponse(BaseModel):
    match: dict[str, Any]
    teams: list[dict[str, Any]]
    scores: list[TeamScoreResponse]
    title: str
    status: str | None
    date_display: str | None


class ScheduleResponse(BaseModel):
    matches: list[dict[str, Any]]
    teams: list[dict[str, Any]]


# =============================================================================
# Cache / errors
# =============================================================================


class CacheStatsResponse(BaseModel):
    name: str
    ttl_seconds: float
    entries: int
    fresh_entries: int
    hits: int
    misses: int


class UpstreamErrorResponse(BaseModel):
    detail: str
    status_code: int
    status_text: str
