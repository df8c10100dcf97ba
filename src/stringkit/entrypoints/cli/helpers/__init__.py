"""CLI helpers for STRINGKIT.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, message emitters that write to stderr with emoji→ASCII fallbacks,
and Click callbacks that parse repeatable ``NAME=VALUE`` options.
"""

from .hyperlinks import hyperlink
from .messages import error, success

__all__ = ["error", "success", "hyperlink"]
