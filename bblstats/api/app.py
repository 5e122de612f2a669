"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bblstats import __version__
from bblstats.api.models import UpstreamErrorResponse
from bblstats.api.routes import cache, matches, players, standings, teams
from bblstats.providers.sportspress import NotFoundError, SportsPressError
from bblstats.services import StatsService, create_stats_service

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SportsPressError)
    async def upstream_error_handler(request: Request, exc: SportsPressError) -> JSONResponse:
        logger.warning(
            "[API] Upstream failure on %s: %d %s",
            request.url.path,
            exc.status_code,
            exc.status_text,
        )
        body = UpstreamErrorResponse(
            detail=str(exc), status_code=exc.status_code, status_text=exc.status_text
        )
        return JSONResponse(status_code=502, content=body.model_dump())


def create_app(service: StatsService | None = None) -> FastAPI:
    """Build the app around one StatsService (one cache set per process)."""
    stats_service = service or create_stats_service()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await stats_service.close()

    app = FastAPI(title="BBL Stats", version=__version__, lifespan=lifespan)
    app.state.stats_service = stats_service

    for module in (standings, teams, players, matches, cache):
        app.include_router(
            module.router,
            prefix="/api",
            responses={502: {"model": UpstreamErrorResponse}},
        )

    _register_error_handlers(app)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app
