"""
Calendar arithmetic used to apply relative time tokens.

Fixed-length units (seconds through fortnights) are plain ``timedelta``
additions. Months and years go through ``dateutil.relativedelta``, which
keeps the time of day and clamps the day of month to the last valid day of
the destination month::

    >>> add_months(datetime(2001, 1, 31), 1)
    datetime.datetime(2001, 2, 28, 0, 0)
    >>> add_years(datetime(2000, 2, 29), 1)
    datetime.datetime(2001, 2, 28, 0, 0)

Results outside the range ``datetime`` can represent raise
``OverflowError`` (fixed-length units) or ``ValueError`` (months and years);
neither is caught here.
"""

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from .exceptions import FormatError
from .units import RelativeTimeUnit

# Fixed-length units, expressed as timedelta keyword arguments.
_FIXED_UNITS = {
    RelativeTimeUnit.SECONDS: ('seconds', 1),
    RelativeTimeUnit.MINUTES: ('minutes', 1),
    RelativeTimeUnit.HOURS: ('hours', 1),
    RelativeTimeUnit.DAYS: ('days', 1),
    RelativeTimeUnit.WEEKS: ('days', 7),
    RelativeTimeUnit.FORTNIGHTS: ('days', 14),
}


def add_months(dateobj: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the end of the target month."""
    if not months:
        return dateobj
    return dateobj + relativedelta(months=months)


def add_years(dateobj: datetime, years: int) -> datetime:
    """Add calendar years; Feb 29 becomes Feb 28 in a non-leap target year."""
    if not years:
        return dateobj
    return dateobj + relativedelta(years=years)


def shift(dateobj: datetime, unit: RelativeTimeUnit, magnitude: int) -> datetime:
    """Shift ``dateobj`` by ``magnitude`` units of ``unit``."""
    if unit in _FIXED_UNITS:
        name, factor = _FIXED_UNITS[unit]
        return dateobj + timedelta(**{name: magnitude * factor})
    if unit is RelativeTimeUnit.MONTHS:
        return add_months(dateobj, magnitude)
    if unit is RelativeTimeUnit.YEARS:
        return add_years(dateobj, magnitude)
    raise FormatError(f"Unrecognized relative time unit: {unit}")
