"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command emitting one record per level, a
CliRunner, an isolated filesystem per test, and a migrated SQLite database
exposed through ``SHORTKIT_DB_URL``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import click
import pytest
from alembic import command
from click.testing import CliRunner

from shortkit import config
from shortkit.entrypoints.cli.main import shortkit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo() -> None:
    """Emit one record per level, on a project and on a library logger."""
    logger = logging.getLogger("shortkit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    third_party = logging.getLogger("some.thirdparty")
    third_party.info("This is an info-level third-party test message.")
    third_party.warning("This is a warning-level third-party test message.")


def _remove_command(group: click.Group, name: str) -> None:
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo() -> Iterator[None]:
    """Register `log-demo` on the top-level group for one test."""
    shortkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command(shortkit, "log-demo")


@pytest.fixture
def runner() -> CliRunner:
    """A Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner, clean_env) -> Iterator[None]:
    """Isolated working directory, no SHORTKIT_* variables, no stray log file."""
    with runner.isolated_filesystem():
        clean_env.setenv("SHORTKIT_LOG_PATH", "latest.log")
        yield


@pytest.fixture
def migrated_db(fs, clean_env, sqlite_url_file: str) -> str:
    """Point SHORTKIT_DB_URL at a SQLite file migrated to head."""
    command.upgrade(config.build_alembic_config(sqlite_url_file), "head")
    clean_env.setenv("SHORTKIT_DB_URL", sqlite_url_file)
    return sqlite_url_file
