"""Logging setup for the shocktest command line.

Library modules only create loggers (``logging.getLogger(__name__)``); this
module is what attaches handlers, and only the CLI calls it. Two sinks are
available:

- the console, a Rich handler on **stderr** so that the test report on stdout
  is never interleaved with log records;
- the flight recorder, an in-memory ring of DEBUG records that is written to
  a file once something goes wrong (a WARNING or worse), or on exit when
  forced.

Records from code under test are tagged on the console with the top-level
name of their logger (``[urllib3] ...``) so they can be told apart from the
harness' own records.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "shocktest"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[<top-level name>]`` for foreign loggers.

    Harness records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Console threshold. Ignored in debug mode, which shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of the short third-party prefix.
        color: Let Rich pick a color system; ``False`` renders plain text.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to `path`.

    The file is truncated when the recorder is created. Up to `capacity`
    records are buffered; the buffer is written out when a record at
    `flush_level` or above arrives, when it is full, and on close if
    `flush_on_close` is set.
    """
    sink = logging.FileHandler(path, mode="w", encoding="utf-8")
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=sink,
        flushOnClose=flush_on_close,
    )


@dataclass
class LoggingSettings:
    """What the CLI asked for, as resolved from options and environment.

    Attributes:
        verbosity: Net count of ``-v`` minus ``-q``; 0 is WARNING.
        debug: Developer diagnostics on the console.
        color: Colored console output.
        log_path: Flight recorder destination.
        flight_recorder: Whether the flight recorder is attached.
        capacity: Flight recorder buffer size, in records.
        force_flush: Write the whole buffer out on exit.
        logger_levels: Per-logger minimum levels.
    """

    verbosity: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """Console threshold, clamped to DEBUG..CRITICAL."""
        level = logging.WARNING - 10 * self.verbosity
        return max(logging.DEBUG, min(logging.CRITICAL, level))


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Attach the console (and flight recorder) to the root logger.

    Replaces any handlers already on the root logger. The root logger itself
    passes everything; each handler applies its own threshold. Per-logger
    levels are applied last, so they bind both sinks.

    Returns:
        The handlers attached, console first.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.console_level,
            debug_mode=settings.debug,
            color=settings.color,
        )
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<unknown>"


def log_startup(
    logger: Logger,
    app_version: str,
    settings: LoggingSettings,
    handlers: list[Handler],
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics for bug reports."""
    logger.info(
        "shocktest %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )

    diagnostics = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Click": _dist_version("click"),
        "Rich": _dist_version("rich"),
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for key, value in diagnostics.items():
        logger.debug("%s: %s", key, value)

    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path if settings.log_path else "<none>",
            settings.capacity,
            settings.force_flush,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
