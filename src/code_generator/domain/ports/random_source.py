"""Random source port.

Random generation is an injected capability. Infrastructure provides
the implementations; tests substitute deterministic ones.
"""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Source of random scalars."""

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high] (both inclusive)."""
        ...

    def alphanumeric(self, length: int) -> str:
        """String of length ASCII letters and digits."""
        ...
