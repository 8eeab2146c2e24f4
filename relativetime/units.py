"""
Relative time units and the localizable vocabulary that names them.

Each plugin instance owns its own :class:`UnitVocabulary`, seeded with the
GNU ``date`` aliases. Localizers add entries to that instance only::

    >>> vocabulary = UnitVocabulary()
    >>> vocabulary["heure"] = RelativeTimeUnit.HOURS
    >>> vocabulary["HEURE"]
    <RelativeTimeUnit.HOURS: 'Hours'>
"""

import logging
from collections.abc import MutableMapping
from enum import Enum
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Enums
# =============================================================================

class RelativeTimeUnit(Enum):
    """Units a relative time token can be expressed in."""
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    DAYS = "Days"
    WEEKS = "Weeks"
    FORTNIGHTS = "Fortnights"
    MONTHS = "Months"
    YEARS = "Years"
    # Never produced by tokenization; lets callers build an invalid token.
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "RelativeTimeUnit":
        """Look up a unit by member name or display value, ignoring case."""
        folded = name.strip().casefold()
        for unit in cls:
            if folded in (unit.name.casefold(), unit.value.casefold()):
                return unit
        raise KeyError(name)


# =============================================================================
# Default vocabulary
# =============================================================================

DEFAULT_UNITS = {
    'sec': RelativeTimeUnit.SECONDS,
    'secs': RelativeTimeUnit.SECONDS,
    'second': RelativeTimeUnit.SECONDS,
    'seconds': RelativeTimeUnit.SECONDS,
    'min': RelativeTimeUnit.MINUTES,
    'mins': RelativeTimeUnit.MINUTES,
    'minute': RelativeTimeUnit.MINUTES,
    'minutes': RelativeTimeUnit.MINUTES,
    'hour': RelativeTimeUnit.HOURS,
    'hours': RelativeTimeUnit.HOURS,
    'day': RelativeTimeUnit.DAYS,
    'days': RelativeTimeUnit.DAYS,
    'week': RelativeTimeUnit.WEEKS,
    'weeks': RelativeTimeUnit.WEEKS,
    'fortnight': RelativeTimeUnit.FORTNIGHTS,
    'fortnights': RelativeTimeUnit.FORTNIGHTS,
    'month': RelativeTimeUnit.MONTHS,
    'months': RelativeTimeUnit.MONTHS,
    'year': RelativeTimeUnit.YEARS,
    'years': RelativeTimeUnit.YEARS,
}


# =============================================================================
# Vocabulary
# =============================================================================

class UnitVocabulary(MutableMapping):
    """Case-insensitive mapping of unit aliases to :class:`RelativeTimeUnit`.

    Keys are case-folded on both insertion and lookup, so ``"MoNth"`` finds
    the ``"month"`` entry. The original spelling of the most recent insertion
    is kept for iteration.
    """

    def __init__(self, units: Optional[Dict[str, RelativeTimeUnit]] = None):
        self._store: Dict[str, tuple] = {}
        self.update(DEFAULT_UNITS if units is None else units)

    @classmethod
    def empty(cls) -> "UnitVocabulary":
        """Build a vocabulary with no aliases at all."""
        return cls(units={})

    @staticmethod
    def _fold(alias: str) -> str:
        if not isinstance(alias, str):
            raise TypeError(f"Unit alias must be a string, not {type(alias).__name__}")
        return alias.strip().casefold()

    def __getitem__(self, alias: str) -> RelativeTimeUnit:
        return self._store[self._fold(alias)][1]

    def __setitem__(self, alias: str, unit: RelativeTimeUnit) -> None:
        if not isinstance(unit, RelativeTimeUnit):
            raise TypeError(f"Expected a RelativeTimeUnit for alias '{alias}', got {unit!r}")
        key = self._fold(alias)
        if not key:
            raise ValueError("Unit alias must not be blank")
        previous = self._store.get(key)
        if previous is not None and previous[1] is not unit:
            logger.debug(f"Overwriting unit alias '{alias}': {previous[1]} -> {unit}")
        self._store[key] = (alias, unit)

    def __delitem__(self, alias: str) -> None:
        del self._store[self._fold(alias)]

    def __iter__(self) -> Iterator[str]:
        return (alias for alias, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, alias) -> bool:
        if not isinstance(alias, str):
            return False
        return self._fold(alias) in self._store

    def copy(self) -> "UnitVocabulary":
        return UnitVocabulary(units=dict(self.items()))

    def __repr__(self) -> str:
        return f"UnitVocabulary({dict(self.items())!r})"
