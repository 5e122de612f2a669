"""SportsPress REST API HTTP client.

Handles raw HTTP requests to the SportsPress (WordPress) REST endpoints
that back bbl.hr: events, players, teams and league tables.
No data transformation - just fetch and return JSON.

Failures are raised, not swallowed:
- SportsPressError for non-2xx responses (status code + reason) and for
  network/decoding failures (status 0, "Network Error")
- NotFoundError when a slug lookup matches nothing
"""

import logging
from typing import Any, Literal

import httpx

from bblstats.config import get_settings

logger = logging.getLogger(__name__)

EventStatus = Literal["scheduled", "live", "completed", "postponed", "cancelled"]

NETWORK_ERROR_STATUS = 0
NETWORK_ERROR_TEXT = "Network Error"


class SportsPressError(Exception):
    """Upstream request failed (HTTP status or transport level)."""

    def __init__(self, message: str, status_code: int, status_text: str):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text

    def __repr__(self) -> str:
        return f"SportsPressError({self.status_code}, {self.status_text!r})"


class NotFoundError(LookupError):
    """A lookup by secondary key (slug) matched no record."""

    def __init__(self, resource: str, slug: str):
        super().__init__(f'{resource.capitalize()} with slug "{slug}" not found')
        self.resource = resource
        self.slug = slug


def _clean_params(params: dict[str, Any] | None) -> dict[str, str]:
    """Drop None values and stringify the rest the way the REST API expects."""
    if not params:
        return {}
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        else:
            cleaned[key] = str(value)
    return cleaned


class SportsPressClient:
    """Low-level async SportsPress API client.

    One instance per process; the underlying httpx.AsyncClient is created
    lazily and reused for connection keepalive.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_connections: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.api_timeout
        self._max_connections = (
            max_connections if max_connections is not None else settings.max_connections
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                limits=httpx.Limits(
                    max_connections=self._max_connections,
                    max_keepalive_connections=self._max_connections,
                ),
                transport=self._transport,
            )
        return self._client

    async def _request(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """GET an endpoint and return decoded JSON.

        Args:
            endpoint: Path below the API root (e.g. '/teams/12')
            params: Query parameters; None values are omitted

        Raises:
            SportsPressError: on non-2xx status, transport failure or bad JSON
        """
        url = f"{self._base_url}{endpoint}"
        query = _clean_params(params)

        try:
            response = await self._get_client().get(url, params=query)
        except httpx.HTTPError as e:
            logger.warning("[SPORTSPRESS] Request failed for %s: %s", endpoint, e)
            raise SportsPressError(
                str(e) or "Unknown error occurred", NETWORK_ERROR_STATUS, NETWORK_ERROR_TEXT
            ) from e

        if not response.is_success:
            logger.warning(
                "[SPORTSPRESS] HTTP %d %s for %s",
                response.status_code,
                response.reason_phrase,
                endpoint,
            )
            raise SportsPressError(
                f"API request failed: {response.reason_phrase}",
                response.status_code,
                response.reason_phrase,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("[SPORTSPRESS] Invalid JSON from %s: %s", endpoint, e)
            raise SportsPressError(str(e), NETWORK_ERROR_STATUS, NETWORK_ERROR_TEXT) from e

        logger.debug("[FETCH] %s %s", endpoint, query)
        return data

    # Events (matches)

    async def get_events(
        self,
        league: int | None = None,
        season: int | None = None,
        team: int | None = None,
        status: EventStatus | None = None,
        per_page: int | None = None,
        page: int | None = None,
        order: Literal["asc", "desc"] | None = None,
        orderby: Literal["date", "title"] | None = None,
    ) -> list[dict]:
        """Fetch events, optionally filtered by league/season/team/status."""
        return await self._request(
            "/events",
            {
                "league": league,
                "season": season,
                "team": team,
                "status": status,
                "per_page": per_page,
                "page": page,
                "order": order,
                "orderby": orderby,
            },
        )

    async def get_event(self, event_id: int) -> dict:
        return await self._request(f"/events/{event_id}")

    async def get_upcoming_matches(self, **params: Any) -> list[dict]:
        """Scheduled events, soonest first."""
        params.update(status="scheduled", orderby="date", order="asc")
        return await self.get_events(**params)

    async def get_completed_matches(self, **params: Any) -> list[dict]:
        """Completed events, most recent first."""
        params.update(status="completed", orderby="date", order="desc")
        return await self.get_events(**params)

    # Players

    async def get_players(
        self,
        league: int | None = None,
        season: int | None = None,
        team: int | None = None,
        per_page: int | None = None,
        page: int | None = None,
        search: str | None = None,
    ) -> list[dict]:
        """Fetch players with embedded media (photos)."""
        return await self._request(
            "/players",
            {
                "league": league,
                "season": season,
                "team": team,
                "per_page": per_page,
                "page": page,
                "search": search,
                "_embed": True,
            },
        )

    async def get_player(self, player_id: int) -> dict:
        return await self._request(f"/players/{player_id}", {"_embed": True})

    async def get_player_by_slug(self, slug: str) -> dict:
        players = await self._request("/players", {"slug": slug})
        if not players:
            raise NotFoundError("player", slug)
        return players[0]

    # Teams

    async def get_teams(
        self,
        league: int | None = None,
        season: int | None = None,
        per_page: int | None = None,
        page: int | None = None,
        embed: bool | None = None,
    ) -> list[dict]:
        return await self._request(
            "/teams",
            {
                "league": league,
                "season": season,
                "per_page": per_page,
                "page": page,
                "_embed": embed,
            },
        )

    async def get_team(self, team_id: int) -> dict:
        """Fetch a team with embedded media (logo)."""
        return await self._request(f"/teams/{team_id}", {"_embed": True})

    async def get_team_by_slug(self, slug: str) -> dict:
        teams = await self._request("/teams", {"slug": slug})
        if not teams:
            raise NotFoundError("team", slug)
        return teams[0]

    # League tables

    async def get_tables(
        self,
        league: int | None = None,
        season: int | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[dict]:
        """Fetch standings tables; without a season filter the latest comes first."""
        return await self._request(
            "/tables",
            {"league": league, "season": season, "per_page": per_page, "page": page},
        )

    async def get_table(self, table_id: int) -> dict:
        return await self._request(f"/tables/{table_id}")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
