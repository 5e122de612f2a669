"""Display formatting helpers.

String rendering of numbers, records and dates for the view layer.
Kept apart from bblstats.utilities.stats: computing a value and
formatting it serve different call sites (e.g. win_percentage(0, 0)
is 0.0, format_win_percentage(0, 0) is ".000").

Missing or unparseable values render as "-"; unparseable dates are
returned unchanged.
"""

import math
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from bblstats.config import get_display_timezone

MISSING = "-"


def _parse_number(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def format_number(value: Any, decimals: int = 1) -> str:
    """Fixed-decimal rendering: format_number("12.345") -> "12.3"."""
    num = _parse_number(value)
    if num is None:
        return MISSING
    return f"{num:.{decimals}f}"


def format_percentage(value: float | None, decimals: int = 1) -> str:
    """Fraction to percent: 0.75 -> "75.0%"."""
    if value is None:
        return MISSING
    return f"{value * 100:.{decimals}f}%"


def format_win_percentage(wins: int, losses: int) -> str:
    """Conventional three-decimal notation; 0-0 renders as ".000"."""
    total = wins + losses
    if total == 0:
        return ".000"
    return f"{wins / total:.3f}"


def format_record(wins: int, losses: int) -> str:
    return f"{wins}-{losses}"


def format_streak(streak: str | None) -> str:
    return streak or MISSING


def format_with_commas(value: float) -> str:
    """1000 -> "1,000"."""
    if isinstance(value, int) or float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def format_height(height_cm: Any) -> str:
    """Centimetres to feet and inches: 201 -> 6'7"."""
    cm = _parse_number(height_cm)
    if not cm:
        return MISSING
    inches = int(cm) / 2.54
    feet = int(inches // 12)
    remaining = round(inches % 12)
    return f"{feet}'{remaining}\""


def format_weight(weight_kg: Any) -> str:
    """Kilograms to pounds: 100 -> "220 lbs"."""
    kg = _parse_number(weight_kg)
    if not kg:
        return MISSING
    return f"{round(int(kg) * 2.20462)} lbs"


def _to_display_tz(value: str, tz_name: str | None = None) -> datetime:
    """Parse an upstream date string.

    SportsPress emits naive local times; those are taken to be in the
    display timezone. Aware values are converted into it.
    """
    tz = get_display_timezone(tz_name)
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def _clock_12h(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    period = "PM" if dt.hour >= 12 else "AM"
    return f"{hour}:{dt.minute:02d} {period}"


def format_date(value: str, tz_name: str | None = None) -> str:
    """"2025-10-19T20:00:00" -> "Oct 19, 2025"."""
    try:
        dt = _to_display_tz(value, tz_name)
    except (ValueError, OverflowError, TypeError):
        return value
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def format_datetime(value: str, tz_name: str | None = None) -> str:
    """"2025-10-19T20:00:00" -> "Oct 19, 2025, 8:00 PM"."""
    try:
        dt = _to_display_tz(value, tz_name)
    except (ValueError, OverflowError, TypeError):
        return value
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}, {_clock_12h(dt)}"


def format_time(value: str) -> str:
    """24h "HH:MM" to 12h: "20:05" -> "8:05 PM"."""
    try:
        hours_str, minutes_str = value.split(":")[:2]
        hours, minutes = int(hours_str), int(minutes_str)
    except (AttributeError, ValueError):
        return value
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def relative_time(value: str, now: datetime | None = None, tz_name: str | None = None) -> str:
    """Human relative time: "just now", "5 min ago", "in 3h", "2d ago".

    A week or more away falls back to format_date.
    """
    try:
        dt = _to_display_tz(value, tz_name)
    except (ValueError, OverflowError, TypeError):
        return value

    tz = get_display_timezone(tz_name)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)

    diff_seconds = (dt - now).total_seconds()
    is_past = diff_seconds < 0
    diff_mins = int(abs(diff_seconds) // 60)
    diff_hours = diff_mins // 60
    diff_days = diff_hours // 24

    if diff_mins < 1:
        return "just now"
    if diff_mins < 60:
        return f"{diff_mins} min ago" if is_past else f"in {diff_mins} min"
    if diff_hours < 24:
        return f"{diff_hours}h ago" if is_past else f"in {diff_hours}h"
    if diff_days < 7:
        return f"{diff_days}d ago" if is_past else f"in {diff_days}d"
    return format_date(value, tz_name)
