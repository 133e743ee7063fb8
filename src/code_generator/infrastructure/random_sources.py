"""RandomSource implementations.

SecretsRandomSource: OS CSPRNG via secrets (default).
SeededRandomSource: reproducible sequence via random.Random (tests).
"""

from __future__ import annotations

import random
import secrets
import string

ALPHANUMERIC = string.ascii_letters + string.digits


class SecretsRandomSource:
    """Random source backed by the secrets module."""

    __slots__ = ()

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return low + secrets.randbelow(high - low + 1)

    def alphanumeric(self, length: int) -> str:
        """Random ASCII letters and digits."""
        return "".join(secrets.choice(ALPHANUMERIC) for _ in range(length))


class SeededRandomSource:
    """Deterministic random source.

    Two sources created with the same seed produce the same sequence.

    Attributes:
        seed: Seed the source was created with
    """

    __slots__ = ("_rng", "seed")

    def __init__(self, seed: int) -> None:
        """Initialize with seed.

        Raises:
            TypeError: If seed is not an int
        """
        # FAIL-FIRST: bool is an int subclass but never a meaningful seed
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError(f"seed must be int, got {type(seed).__name__}")
        self.seed = seed
        self._rng = random.Random(seed)  # noqa: S311 - test determinism, not security

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return self._rng.randint(low, high)

    def alphanumeric(self, length: int) -> str:
        """Random ASCII letters and digits."""
        return "".join(self._rng.choices(ALPHANUMERIC, k=length))
