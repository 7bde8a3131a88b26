"""Day resolution: calendar day keys, puzzle numbers and daily targets.

A day key is the ISO date (``YYYY-MM-DD``) in the game's reference time zone,
optionally shifted forward by up to :data:`MAX_SHIFT_DAY_COUNT` days.  The
target for a day is picked by index from the catalog's eligible suburbs, so
it only depends on the day key and the bundled data files.
"""

from __future__ import annotations

import datetime
import zoneinfo

import common.settings

from .catalog import Catalog
from .errors import MissingTargetForDayError
from .models.location import Location
from .models.round import MAX_SHIFT_DAY_COUNT


def reference_zone() -> zoneinfo.ZoneInfo:
    """The time zone day keys are computed in."""
    return zoneinfo.ZoneInfo(common.settings.TIMEZONE)


def clamp_shift(shift_day_count: int) -> int:
    """Clamp a day shift into ``[0, MAX_SHIFT_DAY_COUNT]``."""
    return max(0, min(MAX_SHIFT_DAY_COUNT, shift_day_count))


def get_day_string(
    shift_day_count: int = 0, now: datetime.datetime | None = None
) -> str:
    """Return the day key for *now* shifted by *shift_day_count* days.

    Args:
        shift_day_count: Days to move forward; clamped to the allowed range.
        now: Point in time to resolve; defaults to the current time.  Naive
            datetimes are taken to be UTC.

    Returns:
        The ISO date of the shifted day in the reference time zone.
    """
    if now is None:
        now = datetime.datetime.now(datetime.UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=datetime.UTC)
    local_day = now.astimezone(reference_zone()).date()
    shifted = local_day + datetime.timedelta(days=clamp_shift(shift_day_count))
    return shifted.isoformat()


def day_count(day_key: str) -> int:
    """Days from the launch date to *day_key*; 0 for days before launch.

    Raises:
        ValueError: If *day_key* is not an ISO date.
    """
    day = datetime.date.fromisoformat(day_key)
    return max((day - common.settings.LAUNCH_DATE).days, 0)


def puzzle_number(day_key: str) -> int:
    """The 1-based puzzle number shown to players."""
    return day_count(day_key) + 1


def target_for_day(day_key: str, catalog: Catalog) -> Location:
    """Return the target suburb for *day_key*.

    Raises:
        MissingTargetForDayError: If the catalog has no eligible suburb.
    """
    if not catalog.eligible:
        raise MissingTargetForDayError(day_key)
    return catalog.eligible[day_count(day_key) % len(catalog.eligible)]
