"""Terminal message helpers for the STRINGKIT CLI.

Render user-visible status lines with emoji glyphs, falling back to ASCII when
stderr cannot encode them. Messages always go to stderr so stdout only carries
command results.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on Click's stderr stream.

    The stream is looked up on every call so that encoding changes (and test
    patches) are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def success_glyph() -> str:
    """Return "✅", or "[OK]" on terminals that cannot encode it."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌", or "[X]" on terminals that cannot encode it."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  'jane@example.com' looks like an email address.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  'jane.example.com' is not a valid email address.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
