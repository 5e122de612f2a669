"""Response cache endpoints.

- GET /cache/status - Per-resource cache statistics
- POST /cache/clear - Drop every cached response
"""

from fastapi import APIRouter, Depends

from bblstats.api.dependencies import get_stats_service
from bblstats.api.models import CacheStatsResponse
from bblstats.services import StatsService

router = APIRouter(prefix="/cache", tags=["cache"])


@router.get("/status", response_model=list[CacheStatsResponse])
def get_cache_status(service: StatsService = Depends(get_stats_service)):
    return service.cache_stats()


@router.post("/clear")
def clear_cache(service: StatsService = Depends(get_stats_service)) -> dict:
    service.clear_caches()
    return {"status": "cleared"}
