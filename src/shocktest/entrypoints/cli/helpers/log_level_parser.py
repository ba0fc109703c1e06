"""Parsing of ``-L/--logger-level NAME=LEVEL`` values.

Values arrive either as a tuple (the option repeated on the command line) or
as one string (``SHOCKTEST_LOGGER_LEVELS``), and any item may itself hold
several pairs separated by commas or whitespace.
"""

import logging
import re
from collections.abc import Iterable, Iterator

import click

# Code under test commonly drives asyncio, whose DEBUG chatter drowns the report.
DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _pairs(value: str | Iterable[str]) -> Iterator[str]:
    chunks = [value] if isinstance(value, str) else value
    for chunk in chunks:
        yield from filter(None, _SEPARATORS.split(chunk))


def _level(text: str) -> int:
    level = logging.getLevelNamesMapping().get(text.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into ``{name: numeric level}``.

    Starts from `DEFAULT_LIB_LEVELS`; later pairs override earlier ones.

    Raises:
        click.BadParameter: On an item without ``=`` or an unknown level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for pair in _pairs(value):
        name, sep, level = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {pair!r}")
        levels[name.strip()] = _level(level)
    return levels
