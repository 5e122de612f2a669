"""Teams API endpoints."""

from fastapi import APIRouter, Depends

from bblstats.api.dependencies import get_stats_service
from bblstats.api.models import TeamDetailResponse
from bblstats.services import StatsService

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("")
async def list_teams(service: StatsService = Depends(get_stats_service)) -> list[dict]:
    """All teams with embedded logos."""
    return await service.load_teams()


@router.get("/slug/{slug}")
async def get_team_by_slug(slug: str, service: StatsService = Depends(get_stats_service)) -> dict:
    """Look up a team by its WordPress slug. 404 when none matches."""
    return await service.load_team_by_slug(slug)


@router.get("/{team_id}", response_model=TeamDetailResponse)
async def get_team(team_id: int, service: StatsService = Depends(get_stats_service)):
    """Team record, players who have appeared this season (top scorers first) and team totals."""
    return TeamDetailResponse.model_validate(await service.load_team(team_id))
