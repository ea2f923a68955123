"""Parse ``-L NAME=LEVEL`` options into per-logger levels.

Values may be repeated on the command line or given as one comma/space
separated string (as ``EXAMPORTAL_LOGGER_LEVELS`` is). LEVEL is a standard
level name in any case (``info``, ``WARNING``) or a bare number.
"""

import logging
import re
from collections.abc import Iterable

import click

# Library loggers quietened unless overridden
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | Iterable[str]) -> list[str]:
    """Flatten one string or a sequence of strings into non-empty items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _to_level(text: str) -> int:
    """Return the numeric level for a level name or number.

    Raises:
        click.BadParameter: If ``text`` names no logging level.
    """
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback mapping logger names to levels.

    Starts from ``DEFAULT_LIB_LEVELS``; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _to_level(level_text)
    return levels
