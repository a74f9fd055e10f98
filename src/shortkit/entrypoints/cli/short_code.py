"""``shortkit short-code`` commands."""

from __future__ import annotations

import logging
import random

import click
import click_extra as clickx

from shortkit import config
from shortkit.domain.short_code import MIN_SHORT_CODE_LENGTH, RandomShortCodeGenerator

logger = logging.getLogger(__name__)


@click.group(name="short-code", cls=clickx.ExtraGroup)
def short_code() -> None:
    """Short code utilities."""


@short_code.command()
@click.option(
    "--length",
    "-l",
    type=click.IntRange(min=MIN_SHORT_CODE_LENGTH),
    default=None,
    help="Code length (defaults to SHORTKIT_SHORT_CODE_LENGTH or 5).",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many codes to generate.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed a deterministic generator (for reproducible output only).",
)
def generate(length: int | None, count: int, seed: int | None) -> None:
    """Print randomly generated short codes, one per line."""
    if length is None:
        try:
            length = config.get_default_short_code_length()
        except config.InvalidSettingError as e:
            raise click.ClickException(str(e)) from e

    generator = RandomShortCodeGenerator(random.Random(seed) if seed is not None else None)
    logger.debug("Generating %d short code(s) of length %d", count, length)
    for _ in range(count):
        click.echo(generator.generate(length))
