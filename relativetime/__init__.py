__version__ = "1.0.0"

from .conf import apply_settings, Settings
from .arithmetic import ArithmeticTimePlugin
from .calendar_arithmetic import add_months, add_years, shift
from .exceptions import FormatError, NullInputError, SettingValidationError
from .plugin import TimeParserPlugin
from .tokens import TimeToken, format_tokens
from .units import DEFAULT_UNITS, RelativeTimeUnit, UnitVocabulary

_default_plugin = ArithmeticTimePlugin()


def _get_plugin(settings):
    if settings._default:
        return _default_plugin
    return ArithmeticTimePlugin(settings=settings)


@apply_settings
def tokenize(date_string, settings=None):
    """Tokenize a relative time expression with the default English units.

    :param date_string:
        A relative time expression such as ``"2 weeks 3 days ago"``.
    :type date_string: str

    :param settings:
        Configure customized behavior using settings defined in :mod:`relativetime.conf.Settings`.
    :type settings: dict

    :return: A list of :class:`TimeToken`, empty if the expression is not recognized.
    :raises: ``NullInputError`` if ``date_string`` is None,
        ``SettingValidationError`` if a provided setting is not valid.
    """
    return _get_plugin(settings).tokenize(date_string)


@apply_settings
def apply(date_string, base=None, settings=None):
    """Shift a timestamp by a relative time expression.

    :param date_string:
        A relative time expression such as ``"15 years -12 months"``.
    :type date_string: str

    :param base:
        The timestamp to shift. Defaults to ``RELATIVE_BASE`` from settings,
        or the current local time.
    :type base: datetime.datetime

    :param settings:
        Configure customized behavior using settings defined in :mod:`relativetime.conf.Settings`.
    :type settings: dict

    :return: The shifted :class:`datetime.datetime`, or None if the expression is not recognized.

    Example usage::

        >>> import relativetime
        >>> from datetime import datetime
        >>> relativetime.apply("1 month", base=datetime(2001, 1, 31))
        datetime.datetime(2001, 2, 28, 0, 0)
        >>> relativetime.apply("four eggs ago", base=datetime(2001, 1, 31)) is None
        True
    """
    plugin = _get_plugin(settings)
    tokens = plugin.tokenize(date_string)
    if not tokens:
        return None
    return plugin.apply_all(tokens, base)
