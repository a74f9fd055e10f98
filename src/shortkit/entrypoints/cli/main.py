"""SHORTKIT CLI entry point.

Defines the top-level ``shortkit`` command (via Click-Extra), wires logging,
and registers the subcommands:

- ``shortkit short-code``: generate short codes.
- ``shortkit resolve``: resolve tags/domains against the database.
- ``shortkit db``: forward-only database management.

Examples
    $ shortkit --version
    $ shortkit short-code generate -n 3
    $ shortkit db upgrade
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from shortkit import __version__
from shortkit.logging import (
    FLIGHT_RECORDER_CAPACITY,
    log_startup,
    setup_logging,
    verbosity_to_level,
)

from .db import db as db_group
from .helpers import parse_log_level
from .resolve import resolve as resolve_group
from .short_code import short_code as short_code_group

logger = logging.getLogger(__name__)


HELP = """SHORTKIT command-line interface.

    Tools around the short URL domain core: generate short codes, resolve tags
    and domains against the relation store, and manage its database schema.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Log one level more than WARNING per repetition (-vv is DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Log one level less than WARNING per repetition.",
)
@click.option(
    "--debug/--no-debug",
    help="Log everything to the console with logger names and source lines.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder dumps to.",
    default=Path(user_log_dir("shortkit", appauthor=False)) / "latest.log",
    envvar="SHORTKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="SHORTKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs (or on exit with --force-flush)."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
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
        "Set the minimum LEVEL of specific loggers (NAME=LEVEL). Repeatable, "
        "or a comma/space list in SHORTKIT_LOGGER_LEVELS."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def shortkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
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
    """SHORTKIT command-line interface."""
    level = verbosity_to_level(verbose_count, quiet_count)
    handlers = setup_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


shortkit.add_command(short_code_group)
shortkit.add_command(resolve_group)
shortkit.add_command(db_group)
