"""String helpers aggregated on the ``StringUtils`` namespace.

Locally defined helpers are pure and never raise for absent or blank input;
they return a safe default (``""``, ``False`` or ``None``) instead.

Case conversion, padding, repetition and word splitting are re-exported from
`pydash` unchanged, pluralization is backed by `inflect`, and templating by
`jinja2`. Errors raised by those libraries propagate as-is.

Examples:
    >>> StringUtils.join(["a", "b"], "-")
    'a-b'
    >>> StringUtils.truncate_right("hello world", 8)
    'hello...'
    >>> StringUtils.filename("a/b/c.txt")
    'c.txt'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

import inflect
import pydash
from jinja2 import Environment, StrictUndefined

from stringkit import config
from stringkit.errors import UnknownCaseStyleError
from stringkit.utils import collections as collection_utils

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(config.EMAIL_PATTERN)

_INFLECT = inflect.engine()
_TEMPLATES = Environment(
    undefined=StrictUndefined, autoescape=False, keep_trailing_newline=True
)


# ============================================================================
#                               Local helpers
# ============================================================================


def filename(value: str | None = None) -> str | None:
    """Return the last ``/``-separated segment of *value*, extension included.

    Returns None when *value* is None.
    """
    if value is None:
        return None
    return value.split("/")[-1]


def has_value(value: Any = None) -> bool:
    """Determine whether *value* is not None and not blank.

    The value is converted with ``str()`` before trimming so that non-string
    input (numbers, booleans, ...) is handled too.

    Args:
        value: The value to check.

    Returns:
        bool: True if `value` is not None and ``str(value).strip()`` is non-empty.
    """
    return value is not None and str(value).strip() != ""


def is_empty(value: Any = None) -> bool:
    """Determine whether *value* is None or blank (after trimming both ends).

    Args:
        value: The value to check.

    Returns:
        bool: True if `value` is None or ``str(value).strip()`` is empty.
    """
    return value is None or str(value).strip() == ""


def is_valid_email(value: str | None = None) -> bool:
    """Validate that *value* has the shape of an email address.

    This is a syntactic check of the whole string only; no DNS or MX lookup
    is performed.
    """
    return value is not None and EMAIL_RE.fullmatch(str(value)) is not None


def join(
    values: Sequence[Any] | None, separator: str = config.DEFAULT_SEPARATOR
) -> str:
    """Join *values* into one string with *separator* between each element.

    Args:
        values: Values to join, in order. None elements render as ``""``.
        separator: String placed between consecutive values.

    Returns:
        str: The joined string, or ``""`` if `values` is None or empty.
    """
    if collection_utils.is_empty(values):
        return ""
    return separator.join("" if v is None else str(v) for v in values)  # type: ignore[union-attr]


def truncate_right(value: str, truncate_at_pos: int) -> str:
    """Truncate *value* so that it fits in *truncate_at_pos* characters.

    Values that already fit are returned unchanged. Otherwise the first
    ``truncate_at_pos - 3`` characters are kept, trailing whitespace is
    trimmed and ``"..."`` is appended, unless the kept part already ends
    with ``"."``.

    Args:
        value: The string to truncate.
        truncate_at_pos: Maximum length of the result.

    Returns:
        str: The (possibly) truncated string.

    Note:
        For ``truncate_at_pos <= 3`` (negative included) the kept part is
        empty and the result is ``"..."``.
    """
    if len(value) <= truncate_at_pos:
        return value

    end = max(truncate_at_pos - len(config.ELLIPSIS), 0)
    truncated = value[:end].rstrip()
    logger.debug("Truncating %d characters to %d", len(value), truncate_at_pos)

    if truncated.endswith("."):
        return truncated
    return f"{truncated}{config.ELLIPSIS}"


# ============================================================================
#                     Pluralization and templating
# ============================================================================


def pluralize(count: int | float, singular: str, plural: str | None = None) -> str:
    """Return *singular* when *count* is exactly 1, otherwise the plural form.

    Args:
        count: The number of items being described.
        singular: Singular form of the word.
        plural: Explicit plural form. When omitted, the English plural of
            `singular` is derived with `inflect`.

    Returns:
        str: The word form matching `count`.
    """
    if count == 1:
        return singular
    if plural is not None:
        return plural
    if not singular.strip():
        return singular
    return _INFLECT.plural_noun(singular)


def template(text: str) -> Callable[..., str]:
    """Compile *text* as a Jinja2 template and return its render function.

    Undefined variables raise `jinja2.UndefinedError` when rendering; invalid
    syntax raises `jinja2.TemplateSyntaxError` here.

    Example:
        >>> template("Hello {{ name }}!")(name="World")
        'Hello World!'
    """
    return _TEMPLATES.from_string(text).render


# ============================================================================
#                             Case conversion
# ============================================================================

_CASE_CONVERTERS: dict[str, Callable[[str], str]] = {
    "camel": pydash.camel_case,
    "snake": pydash.snake_case,
    "start": pydash.start_case,
    "capitalize": pydash.capitalize,
    "lower-first": pydash.lower_first,
    "upper-first": pydash.upper_first,
}

CASE_STYLES: tuple[str, ...] = tuple(_CASE_CONVERTERS)


def convert_case(style: str, value: str) -> str:
    """Convert *value* using the case converter registered under *style*.

    Raises:
        UnknownCaseStyleError: If `style` is not one of `CASE_STYLES`.
    """
    try:
        converter = _CASE_CONVERTERS[style]
    except KeyError as e:
        raise UnknownCaseStyleError(style, CASE_STYLES) from e
    logger.debug("Converting %r to %s case", value, style)
    return converter(value)


# ============================================================================
#                               Namespace
# ============================================================================


class StringUtils:  # pylint: disable=too-few-public-methods
    """Namespace aggregating the string helpers and re-exported primitives."""

    camel_case = staticmethod(pydash.camel_case)
    capitalize = staticmethod(pydash.capitalize)
    convert_case = staticmethod(convert_case)
    filename = staticmethod(filename)
    has_value = staticmethod(has_value)
    is_empty = staticmethod(is_empty)
    is_valid_email = staticmethod(is_valid_email)
    join = staticmethod(join)
    lower_first = staticmethod(pydash.lower_first)
    pad = staticmethod(pydash.pad)
    pad_end = staticmethod(pydash.pad_end)
    pad_start = staticmethod(pydash.pad_start)
    pluralize = staticmethod(pluralize)
    repeat = staticmethod(pydash.repeat)
    snake_case = staticmethod(pydash.snake_case)
    start_case = staticmethod(pydash.start_case)
    template = staticmethod(template)
    truncate_right = staticmethod(truncate_right)
    upper_first = staticmethod(pydash.upper_first)
    words = staticmethod(pydash.words)
