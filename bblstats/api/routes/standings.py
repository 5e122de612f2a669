"""Standings API endpoints."""

from fastapi import APIRouter, Depends

from bblstats.api.dependencies import get_stats_service
from bblstats.api.models import StandingsResponse, StandingsRowResponse
from bblstats.core import Standings, StandingsRow
from bblstats.services import StatsService
from bblstats.utilities.formatters import format_record, format_win_percentage

router = APIRouter(prefix="/standings", tags=["standings"])


def _row_to_response(row: StandingsRow) -> StandingsRowResponse:
    return StandingsRowResponse(
        position=row.position,
        team_name=row.team_name,
        team_id=row.team_id,
        wins=row.wins,
        losses=row.losses,
        win_pct=row.win_pct,
        games_behind=row.games_behind,
        points_for=row.points_for,
        points_against=row.points_against,
        differential=row.differential,
        home_record=row.home_record,
        away_record=row.away_record,
        last_10=row.last_10,
        streak=row.streak,
        form=list(row.form),
        record=format_record(row.wins, row.losses),
        win_pct_display=format_win_percentage(row.wins, row.losses),
    )


def _to_response(standings: Standings) -> StandingsResponse:
    return StandingsResponse(
        table_id=standings.table_id,
        title=standings.title,
        rows=[_row_to_response(row) for row in standings.rows],
    )


@router.get("", response_model=StandingsResponse)
async def get_standings(service: StatsService = Depends(get_stats_service)):
    """Latest season standings, sorted by position."""
    return _to_response(await service.load_standings())


@router.get("/tables", response_model=list[StandingsResponse])
async def get_standings_tables(service: StatsService = Depends(get_stats_service)):
    """Every standings table, each parsed on its own."""
    return [_to_response(s) for s in await service.load_standings_tables()]
