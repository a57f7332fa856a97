"""
Timezone handling for chart timestamps.

TIMEZONE POLICY:
================
1. Highcharts consumes UTC milliseconds since the Unix epoch
2. Aware datetimes are converted as-is
3. Naive datetimes are localized exactly once, at the conversion boundary:
   - database TIMESTAMP values are taken as UTC
   - free-form date strings use the SERIES_DATE_TIMEZONE setting

USAGE:
======
    from series_utils.timezone_utils import get_timezone, assume_timezone, to_timestamp_ms

    tz = get_timezone('Europe/Berlin')
    millis = to_timestamp_ms(assume_timezone(datetime(2024, 1, 29, 16, 0), tz))
"""

from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

UTC = timezone.utc


@lru_cache(maxsize=32)
def get_timezone(name: str) -> tzinfo:
    """
    Resolve an IANA timezone name.

    Args:
        name: Timezone name such as 'UTC' or 'America/New_York'

    Returns:
        tzinfo instance (the UTC constant for 'UTC'/'Z')

    Raises:
        ValueError: If the name is unknown
    """
    if name.upper() in ('UTC', 'Z'):
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


# =============================================================================
# Timestamp Conversion Functions
# =============================================================================

def to_timestamp_s(dt: datetime) -> float:
    """
    Convert datetime to seconds since Unix epoch.

    Raises:
        ValueError: If datetime is naive (no timezone)
    """
    validate_aware(dt, "to_timestamp_s")
    return dt.timestamp()


def to_timestamp_ms(dt: datetime) -> float:
    """
    Convert datetime to milliseconds since Unix epoch, the Highcharts time unit.

    Raises:
        ValueError: If datetime is naive (no timezone)
    """
    return 1000 * to_timestamp_s(dt)


# =============================================================================
# Localization
# =============================================================================

def assume_timezone(dt: datetime, tz: tzinfo) -> datetime:
    """
    Treat a naive datetime as wall-clock time in the given timezone.

    Aware datetimes are returned unchanged.
    """
    if dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=tz)


def assume_utc(dt: datetime) -> datetime:
    """Treat a naive datetime as UTC; aware datetimes are returned unchanged."""
    return assume_timezone(dt, UTC)


# =============================================================================
# Validation Functions
# =============================================================================

def validate_aware(dt: datetime, context: str = "") -> datetime:
    """
    Validate that datetime is timezone-aware, raise error if not.

    Raises:
        ValueError: If datetime is naive (no timezone)
    """
    if dt.tzinfo is None:
        ctx = f" in {context}" if context else ""
        raise ValueError(
            f"Naive datetime not allowed{ctx}: {dt}. "
            f"Use assume_utc() or assume_timezone() first."
        )
    return dt
