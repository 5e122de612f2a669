"""Shared fixtures: a controllable clock and an in-memory SportsPress stand-in."""

from collections import Counter

import pytest

from bblstats.providers.sportspress.client import NotFoundError, SportsPressError

LEAGUE_ID = 69
SEASON_ID = 239


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_player(
    player_id: int,
    name: str,
    games: int | str,
    ppg: float | str = 10.0,
    team_id: int = 1,
    **stats,
) -> dict:
    return {
        "id": player_id,
        "title": {"rendered": name},
        "slug": name.lower().replace(" ", "-"),
        "current_teams": [team_id],
        "number": str(player_id),
        "statistics": {
            str(LEAGUE_ID): {str(SEASON_ID): {"g": str(games), "ppg": str(ppg), **stats}}
        },
    }


def make_table(table_id: int = 1, title: str = "BBL 2025/2026") -> dict:
    return {
        "id": table_id,
        "title": {"rendered": title},
        "data": {
            "0": {"name": "Team", "pos": "Pos", "w": "W", "ltwo": "L"},
            "12": {
                "pos": 2,
                "name": "Zadar",
                "w": "8",
                "ltwo": "4",
                "pct": "0.667",
                "gb": "2",
                "pf": "900",
                "pa": "850",
                "diff": "50",
                "strk": '<span style="color:#888888">L1</span>',
                "form": '<div class="sp-form-events"><a>W</a> <a>L</a></div>',
            },
            "7": {
                "pos": 1,
                "name": "Cibona",
                "w": "10",
                "ltwo": "2",
                "pct": "0.833",
                "gb": "-",
                "pf": "1000",
                "pa": "880",
                "diff": "120",
                "strk": "<span>W4</span>",
                "form": "<a>W</a><a>W</a><a>W</a><a>W</a>",
            },
            "30": {"pos": 3, "name": "Split", "w": "0", "ltwo": "0"},
        },
    }


class FakeSportsPressClient:
    """Records calls and serves canned payloads; raises when told to."""

    def __init__(self):
        self.calls = Counter()
        self.tables = [make_table()]
        self.teams = {
            7: {"id": 7, "title": {"rendered": "Cibona"}, "slug": "cibona"},
            12: {"id": 12, "title": {"rendered": "Zadar"}, "slug": "zadar"},
        }
        self.players = [
            make_player(1, "Ivan Šarić", games=10, ppg=18.5, team_id=7),
            make_player(2, "Marko Horvat", games=0, ppg=0, team_id=7),
            make_player(3, "Luka Babić", games=4, ppg=21.0, team_id=12),
        ]
        self.events = {
            500: {
                "id": 500,
                "title": {"rendered": "Cibona &#8211; Zadar"},
                "date": "2025-10-19T20:00:00",
                "status": "publish",
                "teams": [7, 12],
                "results": {
                    "0": {"one": "1", "two": "2", "three": "3", "four": "4", "points": "T"},
                    "7": {"one": "20", "two": "25", "three": "18", "four": "22", "points": "85"},
                    "12": {"one": "19", "two": "21", "three": "20", "four": "20", "points": "80"},
                },
            },
            501: {
                "id": 501,
                "title": {"rendered": "Zadar &#8211; Cibona"},
                "date": "2025-11-02T18:00:00",
                "status": "future",
                "teams": [12, 7],
                "results": [],
            },
            499: {
                "id": 499,
                "title": {"rendered": "Cibona &#8211; Split"},
                "date": "2025-10-05T19:00:00",
                "status": "publish",
                "teams": [7, 30],
            },
        }
        self.fail_with: Exception | None = None

    def _call(self, name: str) -> None:
        self.calls[name] += 1
        if self.fail_with is not None:
            raise self.fail_with

    async def get_tables(self, **params):
        self._call("get_tables")
        return self.tables

    async def get_teams(self, **params):
        self._call("get_teams")
        return list(self.teams.values())

    async def get_team(self, team_id):
        self._call("get_team")
        if team_id not in self.teams:
            raise SportsPressError("API request failed: Not Found", 404, "Not Found")
        return self.teams[team_id]

    async def get_team_by_slug(self, slug):
        self._call("get_team_by_slug")
        for team in self.teams.values():
            if team["slug"] == slug:
                return team
        raise NotFoundError("team", slug)

    async def get_players(self, team=None, page=None, **params):
        self._call("get_players")
        if page is not None and page > 1:
            return []
        if team is not None:
            return [p for p in self.players if p["current_teams"] == [team]]
        return self.players

    async def get_player(self, player_id):
        self._call("get_player")
        return next(p for p in self.players if p["id"] == player_id)

    async def get_player_by_slug(self, slug):
        self._call("get_player_by_slug")
        for player in self.players:
            if player["slug"] == slug:
                return player
        raise NotFoundError("player", slug)

    async def get_event(self, event_id):
        self._call("get_event")
        return self.events[event_id]

    async def get_events(self, **params):
        self._call("get_events")
        return list(self.events.values())

    async def close(self):
        self.calls["close"] += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_client() -> FakeSportsPressClient:
    return FakeSportsPressClient()
