"""
Arithmetic time plugin: GNU ``date`` style relative expressions.

Recognizes inputs made only of occurrences of the form::

    [+|-][number] unit [ago]

such as ``"15 years -12 months 2 fortnights ago"``, and applies each
occurrence to a timestamp with calendar-aware month and year arithmetic.

Rules:
- The sign must touch the number (or the unit when there is no number).
- A missing number means 1.
- ``ago`` negates the occurrence it follows, so ``"-2 days ago"`` is +2 days.
- The whole input must match. One unknown unit or any stray text anywhere
  rejects the input and no tokens are returned.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

import regex as re

from .calendar_arithmetic import shift
from .conf import apply_settings
from .exceptions import FormatError, NullInputError
from .plugin import TimeParserPlugin
from .tokens import TimeToken
from .units import RelativeTimeUnit, UnitVocabulary

logger = logging.getLogger(__name__)

# Sign, optional number and a known unit alias ending at whitespace or end of
# input. With no number the sign must touch the alias. Aliases are filled in
# from the vocabulary at tokenize time.
OCCURRENCE_TEMPLATE = r"(?P<sign>[+-])?(?:(?P<number>[0-9]+)\s*)?(?P<unit>(?:%s)(?:%s)?)(?=\s|$)"
KEYWORD_PATTERN = re.compile(r"\s+(?P<keyword>\S+)(?=\s|$)", re.U)
SPACES_PATTERN = re.compile(r"\s+", re.U)


class ArithmeticTimePlugin(TimeParserPlugin):
    """Tokenizes and applies relative time expressions like ``"3 weeks ago"``.

    ``supported_units`` belongs to this instance; add entries to it to
    localize the plugin::

        >>> plugin = ArithmeticTimePlugin()
        >>> plugin.supported_units["heure"] = RelativeTimeUnit.HOURS
        >>> plugin.tokenize("42 heures")
        [TimeToken(source_key='arithmetic', raw_text='42 heures', value='42', unit=<RelativeTimeUnit.HOURS: 'Hours'>)]
    """

    KEY = "arithmetic"

    @apply_settings
    def __init__(self, supported_units: Optional[UnitVocabulary] = None, settings=None):
        self.settings = settings
        if supported_units is None:
            supported_units = UnitVocabulary()
        elif not isinstance(supported_units, UnitVocabulary):
            supported_units = UnitVocabulary(units=dict(supported_units))
        self.supported_units = supported_units

    @property
    def key(self) -> str:
        return self.KEY

    # =========================================================================
    # Tokenize
    # =========================================================================

    def tokenize(self, text: str) -> List[TimeToken]:
        if text is None:
            raise NullInputError("text must not be None")
        if not isinstance(text, str):
            raise NullInputError(f"text must be a string, not {type(text).__name__}")

        text = text.strip()
        if not text or not self.supported_units:
            return []

        pattern = self._occurrence_pattern()
        tokens = []
        pos = 0
        while pos < len(text):
            match = SPACES_PATTERN.match(text, pos)
            if match:
                pos = match.end()
            token, end = self._match_occurrence(pattern, text, pos)
            if token is None:
                logger.debug(f"Rejected relative time '{text}' at position {pos}")
                return []
            tokens.append(token)
            pos = end
        return tokens

    def _occurrence_pattern(self):
        # Longest aliases first so "minutes" wins over "min".
        aliases = sorted(self.supported_units, key=len, reverse=True)
        return re.compile(
            OCCURRENCE_TEMPLATE % (
                "|".join(re.escape(alias.strip()) for alias in aliases),
                re.escape(self.settings.PLURAL_SUFFIX),
            ),
            re.I | re.U,
        )

    def _match_occurrence(self, pattern, text: str, pos: int) -> Tuple[Optional[TimeToken], int]:
        match = pattern.match(text, pos)
        if not match:
            return None, pos

        unit = self._lookup_unit(match.group("unit"))
        if unit is None:
            logger.debug(f"Unknown time unit '{match.group('unit')}'")
            return None, pos

        value = int(match.group("number") or 1)
        if match.group("sign") == "-":
            value = -value

        end = match.end()
        keyword = KEYWORD_PATTERN.match(text, end)
        if keyword and self._is_ago(keyword.group("keyword")):
            value = -value
            end = keyword.end()

        token = TimeToken(
            source_key=self.KEY,
            raw_text=text[match.start():end],
            value=str(value),
            unit=unit,
        )
        return token, end

    def _lookup_unit(self, word: str) -> Optional[RelativeTimeUnit]:
        unit = self.supported_units.get(word)
        if unit is not None:
            return unit

        # The suffix is added once, to an alias that does not already end with it.
        suffix = self.settings.PLURAL_SUFFIX.casefold()
        folded = word.casefold()
        if suffix and folded.endswith(suffix) and len(folded) > len(suffix):
            stem = folded[:-len(suffix)]
            if not stem.endswith(suffix):
                return self.supported_units.get(stem)
        return None

    def _is_ago(self, word: str) -> bool:
        folded = word.casefold()
        return any(folded == keyword.casefold() for keyword in self.settings.AGO_KEYWORDS)

    # =========================================================================
    # Apply
    # =========================================================================

    def apply(self, token: TimeToken, base: datetime) -> datetime:
        if token.unit is RelativeTimeUnit.UNKNOWN:
            raise FormatError(f"Unrecognized relative time unit in token '{token}'")
        return shift(base, token.unit, token.magnitude)
