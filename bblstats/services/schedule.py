"""Schedule filtering.

SportsPress reuses WordPress post statuses for events: "future" is a
scheduled match and "publish" a played one.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Literal

from dateutil import parser as date_parser

from bblstats.providers.sportspress.parsers import parse_event_team_ids

logger = logging.getLogger(__name__)

ScheduleStatus = Literal["all", "upcoming", "completed"]

UPCOMING_STATUS = "future"
COMPLETED_STATUS = "publish"

_STATUS_FILTERS = {
    "upcoming": UPCOMING_STATUS,
    "completed": COMPLETED_STATUS,
}


def event_start(event: Mapping[str, Any]) -> datetime:
    """Kickoff as a naive local datetime; undated events sort first."""
    value = event.get("date")
    if not isinstance(value, str) or not value:
        return datetime.min
    try:
        return date_parser.parse(value).replace(tzinfo=None)
    except (ValueError, OverflowError):
        logger.debug("[SCHEDULE] Unparseable date on event %s: %r", event.get("id"), value)
        return datetime.min


def filter_schedule(
    matches: Iterable[Mapping[str, Any]],
    team_id: int | None = None,
    status: ScheduleStatus = "all",
) -> list[Mapping[str, Any]]:
    """Matches for one team and/or status, in date order.

    Completed matches are listed most recent first, everything else
    soonest first.
    """
    filtered = list(matches)
    if team_id:
        filtered = [m for m in filtered if team_id in parse_event_team_ids(m)]

    wanted = _STATUS_FILTERS.get(status)
    if wanted:
        filtered = [m for m in filtered if m.get("status") == wanted]

    filtered.sort(key=event_start, reverse=status == "completed")
    return filtered
