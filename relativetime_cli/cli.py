import argparse
import logging

from dateutil.parser import isoparse

from relativetime import ArithmeticTimePlugin, RelativeTimeUnit, format_tokens


def _unit_alias(value):
    alias, sep, unit_name = value.partition("=")
    if not sep or not alias.strip():
        raise argparse.ArgumentTypeError(
            'expected ALIAS=UNIT (e.g. "heure=Hours"), got "%s"' % value
        )
    try:
        unit = RelativeTimeUnit.from_name(unit_name)
    except KeyError:
        raise argparse.ArgumentTypeError('unknown unit "%s"' % unit_name)
    if unit is RelativeTimeUnit.UNKNOWN:
        raise argparse.ArgumentTypeError('"%s" cannot be used as a unit' % unit_name)
    return alias.strip(), unit


def _timestamp(value):
    try:
        return isoparse(value)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid ISO 8601 timestamp "%s"' % value)


def entrance(argv=None):
    relativetime_argparse = argparse.ArgumentParser(
        prog="relativetime",
        description="Shift a timestamp by a relative time expression such as '2 weeks ago'.",
    )
    relativetime_argparse.add_argument(
        "expression",
        nargs="+",
        help='The relative time expression, e.g. "15 years -12 months 2 fortnights ago"',
    )
    relativetime_argparse.add_argument(
        "--base",
        type=_timestamp,
        help="ISO 8601 timestamp to shift (defaults to the current local time)",
    )
    relativetime_argparse.add_argument(
        "--tokens",
        help="Print the recognized tokens instead of the resulting timestamp",
        action="store_true",
    )
    relativetime_argparse.add_argument(
        "--unit",
        type=_unit_alias,
        action="append",
        default=[],
        metavar="ALIAS=UNIT",
        help='Add a unit alias, e.g. "heure=Hours" (may be repeated)',
    )
    relativetime_argparse.add_argument(
        "--ago",
        action="append",
        metavar="KEYWORD",
        help='Keyword negating the preceding unit (defaults to "ago", may be repeated)',
    )
    relativetime_argparse.add_argument(
        "-v",
        "--verbose",
        help="Log debug output",
        action="store_true",
    )

    args = relativetime_argparse.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    settings = {"AGO_KEYWORDS": args.ago} if args.ago else None
    plugin = ArithmeticTimePlugin(settings=settings)
    for alias, unit in args.unit:
        plugin.supported_units[alias] = unit

    expression = " ".join(args.expression)
    tokens = plugin.tokenize(expression)
    if not tokens:
        relativetime_argparse.error(
            'relativetime: "%s" is not a relative time expression' % expression
        )

    if args.tokens:
        print(format_tokens(tokens))
        return

    base = args.base if args.base is not None else plugin.get_relative_base()
    logging.info("relativetime: Shifting %s", base.isoformat())
    print(plugin.apply_all(tokens, base).isoformat())
