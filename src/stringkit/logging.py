"""Logging helpers used by the STRINGKIT CLI.

Console output goes through Rich on stderr so stdout stays free for command
results. An optional in-memory "flight recorder" keeps recent records at DEBUG
granularity and dumps them to a file when something goes wrong. Records from
third-party loggers get a short ``[libname]`` prefix in the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "stringkit"

# Libraries whose versions are reported in the startup diagnostics.
REPORTED_LIBRARIES = ("pydash", "inflect", "jinja2")

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the ``stringkit`` namespace get
    ``record.prefix`` set to the bracketed top-level logger name, e.g.
    ``"[jinja2]"``. Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Emit colors. Mirrors click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler writing to stderr, ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a memory buffer in front of a log file.

    Args:
        path: File the buffered records are written to. Truncated on open.
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush whatever is buffered when the handler closes.

    Returns:
        MemoryHandler: The buffering handler targeting a `logging.FileHandler`.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def library_version(name: str) -> str:
    """Return the installed version of distribution *name*, or ``"<missing>"``."""
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<missing>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary followed by DEBUG diagnostics.

    The summary (INFO) names the version, console level and flight-recorder
    state. The diagnostics cover the interpreter, platform, process, working
    directory, versions of the string libraries, handler types, flight-recorder
    settings and per-logger level overrides.
    """
    logger.info(
        "STRINGKIT %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for name in REPORTED_LIBRARIES:
        logger.debug("%s: %s", name, library_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
