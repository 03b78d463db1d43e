"""Local clock helpers for attaching calendar dates to fractional hours."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, datetime, timedelta, timezone


def timezone_hours(dt: datetime) -> float:
    """Return the UTC offset of an aware datetime in fractional hours."""
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError("dt must be timezone-aware.")
    return offset.total_seconds() / 3600.0


def fixed_offset(timezone_hours: float) -> timezone:
    """Build a fixed-offset tzinfo for a UTC offset in hours."""
    return timezone(timedelta(hours=timezone_hours))


def split_fractional_hour(hours: float) -> tuple[int, int, int]:
    """Split fractional hours into whole (hour, minute, second), truncating minutes and seconds."""
    whole_hours = int(hours)
    minutes = 60.0 * (hours - whole_hours)
    seconds = 60.0 * (minutes - int(minutes))
    return whole_hours, int(minutes), int(seconds)


def local_hour_to_datetime(
    year: int,
    month: int,
    day: int,
    hours: float,
    timezone_hours: float,
) -> datetime | None:
    """Attach fractional local hours to a calendar date in a fixed-offset zone.

    Day numbers past the end of the month roll into the next month, matching
    the day-fraction arithmetic of the Julian day. Returns ``None`` for years
    outside the range supported by ``datetime``.
    """
    if not MINYEAR <= year <= MAXYEAR:
        return None
    h, m, s = split_fractional_hour(hours)
    midnight = datetime(year, month, 1, tzinfo=fixed_offset(timezone_hours))
    return midnight + timedelta(days=day - 1, hours=h, minutes=m, seconds=s)
