"""FastAPI dependencies."""

from fastapi import Request

from bblstats.services import StatsService


def get_stats_service(request: Request) -> StatsService:
    """The process-wide StatsService created in create_app()."""
    return request.app.state.stats_service
