from dataclasses import dataclass
from typing import Iterable, Optional

from .exceptions import FormatError
from .units import RelativeTimeUnit


@dataclass(frozen=True)
class TimeToken:
    """
    One recognized occurrence of a relative time expression.

    :param source_key: key of the plugin that produced the token.
    :param raw_text: the substring consumed for this occurrence, or ``None``
        for tokens built by hand.
    :param value: the signed integer multiplier as a decimal string.
    :param unit: the unit the multiplier is expressed in.
    """
    source_key: str
    raw_text: Optional[str]
    value: str
    unit: RelativeTimeUnit

    @property
    def magnitude(self) -> int:
        try:
            return int(self.value)
        except (TypeError, ValueError):
            raise FormatError(f"Token value is not an integer: {self.value!r}")

    def __str__(self) -> str:
        return f"{self.unit}:{self.value}"


def format_tokens(tokens: Iterable[TimeToken]) -> str:
    """Render tokens for diagnostics, e.g. ``[Years:15][Months:3]``."""
    return "".join(f"[{token}]" for token in tokens)
