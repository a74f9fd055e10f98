"""Short code generation.

Short codes are drawn from an alphabet without vowels and without glyphs that
are easily confused (``0``/``O``, ``1``/``l``/``I``), so generated codes are
neither accidental words nor hard to read back.

Uniqueness is not guaranteed here. The persistence layer detects collisions
on insert and asks the aggregate to regenerate its code.
"""

import abc
import random
import secrets

# pylint: disable=too-few-public-methods

ALPHABET = "123456789bcdfghjkmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ"
DEFAULT_SHORT_CODE_LENGTH = 5
MIN_SHORT_CODE_LENGTH = 4


class ShortCodeGenerator(abc.ABC):
    """Contract for a short code generator."""

    @abc.abstractmethod
    def generate(self, length: int) -> str:
        """Generate a short code of exactly `length` characters."""


class RandomShortCodeGenerator(ShortCodeGenerator):
    """Random short code generator.

    Uses the operating system's CSPRNG by default. Pass a seeded
    `random.Random` to get reproducible codes in tests.

    Thread-safe as long as the injected `rng` is; the default `SystemRandom`
    keeps no state between calls.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def generate(self, length: int) -> str:
        """Generate a new random short code."""
        return "".join(self._rng.choice(ALPHABET) for _ in range(length))
