"""Service layer."""

from bblstats.providers.sportspress.client import SportsPressClient
from bblstats.services.loaders import MatchDetail, Schedule, StatsService, TeamDetail
from bblstats.utilities.cache import Clock


def create_stats_service(
    client: SportsPressClient | None = None,
    clock: Clock | None = None,
) -> StatsService:
    """Create a StatsService with a default SportsPress client."""
    return StatsService(client or SportsPressClient(), clock=clock)


__all__ = [
    "MatchDetail",
    "Schedule",
    "StatsService",
    "TeamDetail",
    "create_stats_service",
]
