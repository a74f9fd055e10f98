"""Logging setup shared by the SHORTKIT entry points.

Console output goes through Rich on stderr. Next to it an optional "flight
recorder" keeps the last records at DEBUG granularity in memory and dumps
them to a file as soon as a WARNING or worse shows up, so a failed
``shortkit resolve`` leaves a full trace behind without cluttering the console.

Records from libraries (SQLAlchemy, Alembic, ...) are tagged on the console
with their top-level package, e.g. ``[alembic] Running upgrade ...``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from shortkit import config

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "shortkit"

DEFAULT_LEVEL = logging.WARNING
FLIGHT_RECORDER_CAPACITY = 2000

CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def verbosity_to_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts onto a level, one step per flag, from WARNING.

    Example:
        >>> logging.getLevelName(verbosity_to_level(verbose=1))
        'INFO'
    """
    level = DEFAULT_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[package] "`` for records from outside SHORTKIT.

    SHORTKIT's own records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}] "
        return True


def console_handler(
    level: int = DEFAULT_LEVEL, *, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum level shown. Debug mode forces DEBUG.
        debug_mode: Show logger names and source locations.
        color: False disables colors (matches click-extra's ``--no-color``).

    Returns:
        RichHandler: Handler writing to stderr.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def flight_recorder(
    path: Path,
    *,
    capacity: int = FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder writing to `path`.

    The target file is opened lazily (first flush) and truncated then, so a
    run that never flushes leaves any previous dump in place.

    Args:
        path: File the buffer is written to.
        capacity: Records kept in memory.
        flush_level: Records at or above this level trigger a dump.
        flush_on_close: Also dump when the handler is closed.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def setup_logging(  # pylint: disable=too-many-arguments
    *,
    level: int = DEFAULT_LEVEL,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    capacity: int = FLIGHT_RECORDER_CAPACITY,
    flush_on_close: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[Handler]:
    """Configure the root logger for a SHORTKIT process.

    The root logger passes everything; the handlers filter. Previously
    installed root handlers are replaced.

    Args:
        level: Console level.
        debug_mode: See `console_handler`.
        color: See `console_handler`.
        log_path: Flight recorder file; None disables the recorder.
        capacity: Flight recorder size, in records.
        flush_on_close: Dump the flight recorder on shutdown.
        logger_levels: Per-logger minimum levels (``{"sqlalchemy": WARNING}``).

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [
        console_handler(level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            flight_recorder(log_path, capacity=capacity, flush_on_close=flush_on_close)
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def _settings_summary() -> dict[str, str]:
    """Effective SHORTKIT settings, with secrets masked."""
    try:
        db_url = make_url(config.get_db_url()).render_as_string(hide_password=True)
    except config.DatabaseUrlNotSetError:
        db_url = "<unset>"
    except ArgumentError:
        db_url = "<invalid>"
    try:
        length = str(config.get_default_short_code_length())
    except config.InvalidSettingError:
        length = "<invalid>"
    return {
        "db_url": db_url,
        "short_code_length": length,
        "default_domain": config.get_default_domain() or "<none>",
    }


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[Handler],
    log_path: Path | None = None,
    logger_levels: dict[str, int] | None = None,
) -> None:
    """Log a one-line summary at INFO and environment diagnostics at DEBUG."""
    recorder = next((h for h in handlers if isinstance(h, MemoryHandler)), None)
    logger.info(
        "SHORTKIT %s, console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recorder is not None else "OFF",
    )

    logger.debug(
        "Python %s on %s %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
    )
    logger.debug("PID %s, CWD %s", os.getpid(), Path.cwd())
    logger.debug(
        "SQLAlchemy %s, Alembic %s", sqlalchemy.__version__, alembic.__version__
    )
    logger.debug("Settings: %s", _settings_summary())
    if recorder is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path,
            recorder.capacity,
            recorder.flushOnClose,
        )
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in (logger_levels or {}).items()}
        or "<none>",
    )
