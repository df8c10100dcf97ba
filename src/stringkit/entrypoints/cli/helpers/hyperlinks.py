"""OSC-8 hyperlink utilities for the STRINGKIT CLI.

Detects (heuristically) whether a text stream understands OSC-8 terminal
hyperlinks and renders URLs as clickable links, falling back to the bare URL.
"""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values of terminals known to render OSC-8 links.
OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Return True if hyperlinks should be emitted on *stream*.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Notes:
        - Always False when the stream is not a TTY (piped or redirected).
        - Otherwise checks an allowlist of terminal identifiers (VS Code,
          iTerm2, WezTerm, Kitty, Windows Terminal, VTE-based terminals,
          Alacritty, Konsole). Pagers may still strip the escapes.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(("alacritty", "konsole"))


def hyperlink(url: str) -> str:
    """Return *url* wrapped in a BEL-terminated OSC-8 sequence when supported."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
