"""SportsPress (WordPress) REST API provider."""

from bblstats.providers.sportspress.client import (
    NotFoundError,
    SportsPressClient,
    SportsPressError,
)
from bblstats.providers.sportspress.parsers import (
    parse_form_html,
    parse_standings_table,
    parse_standings_tables,
    parse_streak_html,
)

__all__ = [
    "NotFoundError",
    "SportsPressClient",
    "SportsPressError",
    "parse_form_html",
    "parse_standings_table",
    "parse_standings_tables",
    "parse_streak_html",
]
