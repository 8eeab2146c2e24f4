from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from tzlocal import get_localzone

from .tokens import TimeToken


class TimeParserPlugin(ABC):
    """
    Contract between a time parser and one of its plugins.

    The parser hands raw text to :meth:`tokenize`, then threads a timestamp
    through :meth:`apply` for every token it got back, in order.
    """

    settings = None

    @property
    @abstractmethod
    def key(self) -> str:
        """Identifies tokens produced by this plugin among others in a chain."""

    @abstractmethod
    def tokenize(self, text: str) -> List[TimeToken]:
        """Return the tokens recognized in ``text``, or an empty list."""

    @abstractmethod
    def apply(self, token: TimeToken, base: datetime) -> datetime:
        """Return ``base`` modified by ``token``."""

    def get_local_tz(self):
        return get_localzone()

    def get_relative_base(self) -> datetime:
        """The configured ``RELATIVE_BASE``, or the current local time."""
        if self.settings is not None and self.settings.RELATIVE_BASE:
            return self.settings.RELATIVE_BASE
        return datetime.now(self.get_local_tz())

    def apply_all(self, tokens: Iterable[TimeToken], base: Optional[datetime] = None) -> datetime:
        """Apply ``tokens`` one after another, starting from ``base``."""
        date = self.get_relative_base() if base is None else base
        for token in tokens:
            date = self.apply(token, date)
        return date
