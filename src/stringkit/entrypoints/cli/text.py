"""STRINGKIT text CLI: shell access to the string helpers.

Every command writes its result to **stdout** (one value per line) so it can
be captured or piped; status lines from ``check-email`` go to **stderr**.

Failure modes
- Invalid option values (negative widths, malformed ``KEY=VALUE``) → ``BadParameter``.
- Template syntax errors or undefined variables → ``ClickException`` (exit 1).
- ``check-email`` exits with status 1 when the value is not email-shaped.
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx
from jinja2 import TemplateError

from stringkit import config
from stringkit.string_utils import CASE_STYLES, StringUtils

from .helpers import error, success
from .helpers.template_data_parser import parse_template_data

logger = logging.getLogger(__name__)

PAD_SIDES = {
    "both": StringUtils.pad,
    "start": StringUtils.pad_start,
    "end": StringUtils.pad_end,
}


def _echo_bool(value: bool) -> None:
    click.echo("true" if value else "false")


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """String helper commands."""


@text.command()
@click.argument("path")
def filename(path: str) -> None:
    """Print the last '/'-separated segment of PATH."""
    click.echo(StringUtils.filename(path))


@text.command("is-empty")
@click.argument("value", required=False)
def is_empty(value: str | None) -> None:
    """Print 'true' if VALUE is missing or blank, else 'false'."""
    _echo_bool(StringUtils.is_empty(value))


@text.command("has-value")
@click.argument("value", required=False)
def has_value(value: str | None) -> None:
    """Print 'true' if VALUE is present and not blank, else 'false'."""
    _echo_bool(StringUtils.has_value(value))


@text.command("check-email")
@click.argument("value")
@click.pass_context
def check_email(ctx: click.Context, value: str) -> None:
    """Check that VALUE has the shape of an email address.

    Only the syntax is checked; no DNS lookup is made. Exits with status 1
    when VALUE is not email-shaped.
    """
    if StringUtils.is_valid_email(value):
        success(f"{value!r} looks like an email address.")
        return
    error(f"{value!r} is not a valid email address.")
    ctx.exit(1)


@text.command()
@click.argument("values", nargs=-1)
@click.option(
    "--separator",
    "-s",
    default=None,
    help=(
        "String placed between values. Defaults to $STRINGKIT_SEPARATOR, "
        f"or {config.DEFAULT_SEPARATOR!r} when unset."
    ),
)
def join(values: tuple[str, ...], separator: str | None) -> None:
    """Join VALUES with a separator. Prints an empty line for no values."""
    if separator is None:
        separator = config.get_separator()
    logger.info("Joining %d values with %r", len(values), separator)
    click.echo(StringUtils.join(list(values), separator))


@text.command()
@click.argument("value")
@click.option(
    "--at",
    "truncate_at_pos",
    type=click.IntRange(min=len(config.ELLIPSIS)),
    required=True,
    help="Maximum length of the output, ellipsis included (at least 3).",
)
def truncate(value: str, truncate_at_pos: int) -> None:
    """Truncate VALUE on the right, appending '...' when shortened."""
    click.echo(StringUtils.truncate_right(value, truncate_at_pos))


@text.command("case")
@click.argument("style", type=click.Choice(CASE_STYLES))
@click.argument("value")
def case(style: str, value: str) -> None:
    """Convert VALUE to the case STYLE."""
    click.echo(StringUtils.convert_case(style, value))


@text.command()
@click.argument("value")
@click.option(
    "--width",
    type=click.IntRange(min=0),
    required=True,
    help="Target length of the padded value.",
)
@click.option(
    "--side",
    type=click.Choice(list(PAD_SIDES)),
    default="both",
    show_default=True,
    help="Where the padding is added.",
)
@click.option("--fill", default=" ", show_default=True, help="Padding characters.")
def pad(value: str, width: int, side: str, fill: str) -> None:
    """Pad VALUE to WIDTH characters."""
    click.echo(PAD_SIDES[side](value, width, fill))


@text.command()
@click.argument("value")
@click.argument("times", type=click.IntRange(min=0))
def repeat(value: str, times: int) -> None:
    """Print VALUE repeated TIMES times."""
    click.echo(StringUtils.repeat(value, times))


@text.command()
@click.argument("value")
def words(value: str) -> None:
    """Split VALUE into words, one per line."""
    for word in StringUtils.words(value):
        click.echo(word)


@text.command()
@click.argument("count", type=int)
@click.argument("singular")
@click.argument("plural", required=False)
def pluralize(count: int, singular: str, plural: str | None) -> None:
    """Print COUNT followed by the matching form of SINGULAR.

    PLURAL overrides the derived English plural.
    """
    click.echo(f"{count} {StringUtils.pluralize(count, singular, plural)}")


@text.command()
@click.argument("template_text", metavar="TEMPLATE")
@click.option(
    "--data",
    "-d",
    "data",
    multiple=True,
    callback=parse_template_data,
    help="Template variable as KEY=VALUE. Repeatable.",
)
def render(template_text: str, data: dict[str, str]) -> None:
    """Render the Jinja2 TEMPLATE with the given variables."""
    try:
        rendered = StringUtils.template(template_text)(**data)
    except TemplateError as e:
        logger.debug("Template rendering failed", exc_info=True)
        raise click.ClickException(f"Cannot render template: {e}") from e
    click.echo(rendered)
