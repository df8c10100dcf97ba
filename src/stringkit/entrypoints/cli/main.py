"""STRINGKIT CLI entry point.

Defines the top-level ``stringkit`` command (via Click-Extra), configures
logging for every subcommand, and registers the command groups.

Currently available groups
- ``stringkit text``: the string helpers (truncate, join, case conversion, ...).

Notes
- The CLI version is sourced from `stringkit.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Click-Extra derives ``STRINGKIT_*`` environment variables for the options.

Examples
    $ stringkit --version
    $ stringkit text truncate "hello world" --at 8
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from stringkit import __version__
from stringkit.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .text import text as text_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """STRINGKIT command-line interface.

    STRINGKIT bundles small, predictable string helpers: emptiness checks, email
    shape validation, filename extraction, joining, truncation, case conversion,
    padding, pluralization and templating. Results are written to stdout so they
    can be piped; diagnostics go to stderr.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Case/padding: " + hyperlink("https://pydash.readthedocs.io/"),
        "  Templates   : " + hyperlink("https://jinja.palletsprojects.com/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("stringkit", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="STRINGKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="STRINGKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L jinja2=INFO)."
    ),
    default=("jinja2=WARNING", "inflect=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def stringkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """STRINGKIT command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]

    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # handlers do the filtering; the root logger lets everything through
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


stringkit.add_command(text_group)
