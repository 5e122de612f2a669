"""Match and schedule API endpoints."""

from fastapi import APIRouter, Depends, Query

from bblstats.api.dependencies import get_stats_service
from bblstats.api.models import MatchDetailResponse, ScheduleResponse, TeamScoreResponse
from bblstats.services import StatsService
from bblstats.services.schedule import ScheduleStatus
from bblstats.utilities.formatters import format_datetime
from bblstats.utilities.text import rendered

router = APIRouter(tags=["matches"])


@router.get("/matches/{match_id}", response_model=MatchDetailResponse)
async def get_match(match_id: int, service: StatsService = Depends(get_stats_service)):
    """Match record with both teams resolved and the box score."""
    detail = await service.load_match(match_id)
    match_date = detail.match.get("date")
    return MatchDetailResponse(
        match=detail.match,
        teams=detail.teams,
        scores=[TeamScoreResponse.model_validate(score) for score in detail.scores],
        title=rendered(detail.match.get("title")) or "Match",
        status=detail.match.get("status"),
        date_display=format_datetime(match_date) if match_date else None,
    )


@router.get("/schedule", response_model=ScheduleResponse)
async def get_schedule(
    team: int | None = Query(None, ge=1, description="Only matches involving this team"),
    status: ScheduleStatus = Query("all", description="all, upcoming or completed"),
    service: StatsService = Depends(get_stats_service),
):
    """Events for the current league/season, in date order, plus all teams."""
    schedule = await service.load_schedule(team_id=team, status=status)
    return ScheduleResponse(matches=schedule.matches, teams=schedule.teams)
