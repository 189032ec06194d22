"""Time basis: calendar and elapsed-day quantities shared by every position model.

Naive datetimes are treated as UTC. Aware datetimes keep their own wall-clock
fields for day-of-year and fractional hours; elapsed-day arithmetic always
compares true instants.
"""

from datetime import datetime

from pytz import utc

SECONDS_PER_DAY = 86400.0

# 2000-01-01T12:00:00 TT, taken as UTC at this precision
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=utc)


def as_aware(when: datetime) -> datetime:
    """Attach UTC to a naive datetime; leave aware datetimes untouched."""
    if when.tzinfo is None or when.tzinfo.utcoffset(when) is None:
        return utc.localize(when)
    return when


def day_of_year(when: datetime) -> int:
    """Whole days elapsed since January 0 of the timestamp's own calendar year.

    1 January is day 1 at any hour; truncation, not rounding.
    """
    return when.timetuple().tm_yday


def days_since_epoch(when: datetime, epoch: datetime = J2000) -> float:
    """Signed, unclamped day count from epoch to when."""
    return (as_aware(when) - as_aware(epoch)).total_seconds() / SECONDS_PER_DAY


def fractional_hours(when: datetime) -> float:
    """Wall-clock hour of day as a float, read from the timestamp's own fields."""
    return when.hour + when.minute / 60.0 + when.second / 3600.0
