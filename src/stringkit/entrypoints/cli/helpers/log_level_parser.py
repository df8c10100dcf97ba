"""Helpers for parsing logger-level CLI options.

Options take NAME=LEVEL items, either repeated or as one comma/space-separated
string (as they arrive from environment variables). Level names are validated
and converted to the numeric `logging` levels.
"""

import logging
import re

import click

# Loggers of libraries that are quieted unless overridden.
DEFAULT_LIB_LEVELS = {"jinja2": logging.WARNING, "inflect": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten *value* into non-empty items split on commas and whitespace.

    Args:
        value: A single string or a sequence of strings (repeatable option).

    Returns:
        list[str]: The individual items, empty fragments removed.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        if (lvl := getattr(logging, level_str.strip().upper(), None)) is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
