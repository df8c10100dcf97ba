"""Configuration utilities for STRINGKIT.

This module centralizes small helpers and constants related to the string helpers
and the command line.
"""

import os

SEPARATOR_ENV_VAR = "STRINGKIT_SEPARATOR"  # pragma: no mutate

DEFAULT_SEPARATOR = ","  # pragma: no mutate
ELLIPSIS = "..."  # pragma: no mutate

# Whitespace excluded from dot-atoms: ASCII whitespace without the \x1c-\x1f
# separators, Unicode space separators, line/paragraph separators and the BOM.
EMAIL_WHITESPACE = (
    r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Local part (dot-atoms or a quoted string without line breaks), "@", then a
# bracketed IPv4 literal or dotted labels ending in an alphabetic TLD.
# Anchoring is done with fullmatch.
_ATOM = r'[^<>()\[\]\\.,;:' + EMAIL_WHITESPACE + r'@"]+'
EMAIL_PATTERN = (
    r"((" + _ATOM + r"(\." + _ATOM + r")*)"
    r'|("[^\n\r\u2028\u2029]+"))'
    r"@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)


def get_separator() -> str:
    """Get the default join separator.

    Returns:
        The value of the `STRINGKIT_SEPARATOR` environment variable when it is set
        to a non-empty string, otherwise `DEFAULT_SEPARATOR`.
    """
    if not (separator := os.environ.get(SEPARATOR_ENV_VAR)):
        return DEFAULT_SEPARATOR
    return separator
