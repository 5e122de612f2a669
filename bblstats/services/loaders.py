"""Route-level data loaders.

StatsService sits between the HTTP routes and the SportsPress client.
Each resource kind has its own 5 minute TTLCache; collections are cached
under a single key and items under their numeric ID. Raw payloads are
cached, derived records (standings rows, leaderboard) are rebuilt per call.

Independent upstream calls are issued concurrently with asyncio.gather.
An upstream failure propagates to the caller and nothing is cached.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from bblstats.config import get_settings
from bblstats.core import LeaderboardEntry, Standings, TeamScore, TeamStats
from bblstats.providers.sportspress.client import SportsPressClient
from bblstats.providers.sportspress.parsers import (
    games_played,
    parse_event_team_ids,
    parse_match_scores,
    to_standings,
)
from bblstats.services.leaderboard import build_leaderboard
from bblstats.services.schedule import ScheduleStatus, filter_schedule
from bblstats.services.teams import sort_roster_by_points, summarize_roster
from bblstats.utilities.cache import COLLECTION_KEY, Clock, TTLCache, make_cache_key

logger = logging.getLogger(__name__)

# All players are fetched as 8 pages of 100 in parallel
PLAYER_PAGES = 8
PAGE_SIZE = 100


@dataclass
class TeamDetail:
    team: dict
    roster: list[dict] = field(default_factory=list)
    stats: TeamStats | None = None


@dataclass
class MatchDetail:
    match: dict
    teams: list[dict] = field(default_factory=list)
    scores: list[TeamScore] = field(default_factory=list)


@dataclass
class Schedule:
    matches: list[dict] = field(default_factory=list)
    teams: list[dict] = field(default_factory=list)


class StatsService:
    """Cached access to league data for route handlers.

    Construct once per process and share; the caches live on the instance.
    """

    def __init__(
        self,
        client: SportsPressClient,
        clock: Clock | None = None,
        league_id: int | None = None,
        season_id: int | None = None,
    ):
        settings = get_settings()
        self._client = client
        self.league_id = league_id if league_id is not None else settings.league_id
        self.season_id = season_id if season_id is not None else settings.season_id

        self._tables: TTLCache[list[dict]] = TTLCache("tables", clock=clock)
        self._teams: TTLCache[list[dict]] = TTLCache("teams", clock=clock)
        self._team: TTLCache[dict] = TTLCache("team", clock=clock)
        self._roster: TTLCache[list[dict]] = TTLCache("roster", clock=clock)
        self._players: TTLCache[list[dict]] = TTLCache("players", clock=clock)
        self._player: TTLCache[dict] = TTLCache("player", clock=clock)
        self._match: TTLCache[dict] = TTLCache("match", clock=clock)
        self._schedule: TTLCache[Schedule] = TTLCache("schedule", clock=clock)

    @property
    def caches(self) -> list[TTLCache]:
        return [
            self._tables,
            self._teams,
            self._team,
            self._roster,
            self._players,
            self._player,
            self._match,
            self._schedule,
        ]

    # Standings

    async def _fetch_tables(self) -> list[dict]:
        return await self._tables.get_or_fetch(COLLECTION_KEY, self._client.get_tables)

    async def load_standings(self) -> Standings:
        """Latest standings table (first returned by the API), parsed."""
        tables = await self._fetch_tables()
        return to_standings(tables[0] if tables else None)

    async def load_standings_tables(self) -> list[Standings]:
        """Every standings table, each parsed independently, in API order."""
        tables = await self._fetch_tables()
        return [to_standings(table) for table in tables]

    # Teams

    async def load_teams(self) -> list[dict]:
        return await self._teams.get_or_fetch(
            COLLECTION_KEY,
            lambda: self._client.get_teams(per_page=PAGE_SIZE, embed=True),
        )

    async def _fetch_team(self, team_id: int) -> dict:
        return await self._team.get_or_fetch(team_id, lambda: self._client.get_team(team_id))

    async def _fetch_roster(self, team_id: int) -> list[dict]:
        async def fetch() -> list[dict]:
            players = await self._client.get_players(team=team_id, per_page=PAGE_SIZE)
            return [
                p for p in players if games_played(p, self.league_id, self.season_id) > 0
            ]

        return await self._roster.get_or_fetch(team_id, fetch)

    async def load_team(self, team_id: int) -> TeamDetail:
        """Team record and its active roster, fetched concurrently.

        The roster is ordered by season points and summarized into team totals.
        """
        team, roster = await asyncio.gather(
            self._fetch_team(team_id),
            self._fetch_roster(team_id),
        )
        return TeamDetail(
            team=team,
            roster=sort_roster_by_points(roster, self.league_id, self.season_id),
            stats=summarize_roster(roster, self.league_id, self.season_id),
        )

    async def load_team_by_slug(self, slug: str) -> dict:
        return await self._client.get_team_by_slug(slug)

    # Players

    async def load_players(self) -> list[dict]:
        """All players, fetched page by page in parallel and concatenated."""

        async def fetch() -> list[dict]:
            pages = await asyncio.gather(
                *(
                    self._client.get_players(per_page=PAGE_SIZE, page=page)
                    for page in range(1, PLAYER_PAGES + 1)
                )
            )
            players = [player for page in pages if page for player in page]
            logger.info("[LOADER] Cached %d players", len(players))
            return players

        return await self._players.get_or_fetch(COLLECTION_KEY, fetch)

    async def load_player(self, player_id: int) -> dict:
        return await self._player.get_or_fetch(
            player_id, lambda: self._client.get_player(player_id)
        )

    async def load_player_by_slug(self, slug: str) -> dict:
        return await self._client.get_player_by_slug(slug)

    async def load_leaderboard(
        self,
        search: str | None = None,
        min_games: int = 0,
        sort_by: str = "ppg",
        limit: int | None = None,
    ) -> list[LeaderboardEntry]:
        players = await self.load_players()
        return build_leaderboard(
            players,
            self.league_id,
            self.season_id,
            search=search,
            min_games=min_games,
            sort_by=sort_by,
            limit=limit,
        )

    # Matches

    async def load_match(self, match_id: int) -> MatchDetail:
        """Match record, then both teams fetched concurrently, plus the box score."""
        match = await self._match.get_or_fetch(match_id, lambda: self._client.get_event(match_id))
        team_ids = parse_event_team_ids(match)
        teams = await asyncio.gather(*(self._fetch_team(tid) for tid in team_ids))
        return MatchDetail(
            match=match,
            teams=list(teams),
            scores=parse_match_scores(match, team_ids),
        )

    async def load_schedule(
        self, team_id: int | None = None, status: ScheduleStatus = "all"
    ) -> Schedule:
        """Events and teams for the configured league/season.

        The full event list is cached once; team and status filters and
        date ordering are applied per call.
        """

        async def fetch() -> Schedule:
            matches, teams = await asyncio.gather(
                self._client.get_events(
                    league=self.league_id, season=self.season_id, per_page=PAGE_SIZE
                ),
                self._client.get_teams(
                    league=self.league_id, season=self.season_id, per_page=PAGE_SIZE, embed=True
                ),
            )
            return Schedule(matches=matches, teams=teams)

        schedule = await self._schedule.get_or_fetch(
            make_cache_key(self.league_id, self.season_id), fetch
        )
        return Schedule(
            matches=filter_schedule(schedule.matches, team_id=team_id, status=status),
            teams=schedule.teams,
        )

    # Cache management

    def cache_stats(self) -> list[dict]:
        return [cache.stats() for cache in self.caches]

    def clear_caches(self) -> None:
        for cache in self.caches:
            cache.clear()
        logger.info("[LOADER] All caches cleared")

    async def close(self) -> None:
        await self._client.close()
