"""Click callback turning repeated ``KEY=VALUE`` options into template data."""

import re

import click

KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def parse_template_data(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    """Parse KEY=VALUE items into a dict of template variables.

    Values are kept verbatim (they may contain spaces or ``=``); later items
    override earlier ones.

    Raises:
        click.BadParameter: If an item has no ``=`` or KEY is not an identifier.
    """
    data: dict[str, str] = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        if not KEY_RE.fullmatch(key := key.strip()):
            raise click.BadParameter(f"Invalid template variable name: {key!r}")
        data[key] = val
    return data
