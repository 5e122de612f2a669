"""Players API endpoints."""

from fastapi import APIRouter, Depends, Query

from bblstats.api.dependencies import get_stats_service
from bblstats.api.models import LeaderboardEntryResponse, LeaderboardResponse
from bblstats.services import StatsService
from bblstats.services.leaderboard import LeaderboardStat

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    search: str | None = Query(None, description="Name filter, accent-insensitive"),
    min_games: int = Query(0, ge=0, description="Minimum games played"),
    sort: LeaderboardStat = Query("ppg", description="Stat to rank by"),
    limit: int | None = Query(None, ge=1, le=1000),
    service: StatsService = Depends(get_stats_service),
):
    """Player leaderboard for the current league/season."""
    entries = await service.load_leaderboard(
        search=search, min_games=min_games, sort_by=sort, limit=limit
    )
    return LeaderboardResponse(
        count=len(entries),
        league_id=service.league_id,
        season_id=service.season_id,
        players=[LeaderboardEntryResponse.model_validate(e) for e in entries],
    )


@router.get("/slug/{slug}")
async def get_player_by_slug(
    slug: str, service: StatsService = Depends(get_stats_service)
) -> dict:
    return await service.load_player_by_slug(slug)


@router.get("/{player_id}")
async def get_player(player_id: int, service: StatsService = Depends(get_stats_service)) -> dict:
    return await service.load_player(player_id)
