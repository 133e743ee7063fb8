"""Return-value markers for random generation.

A marker is a type object passed to MethodConfig.returns(). With
generation enabled, a recognised marker is replaced by a fresh random
value of that kind on every call.
"""

from __future__ import annotations


class Symbol(str):
    """Name-like value, the marker for random symbol generation.

    Compares equal to the plain str with the same text.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


# Exact identity match: bool is not treated as int.
RANDOM_MARKERS: frozenset[type] = frozenset({int, str, Symbol})


def is_random_marker(value: object) -> bool:
    """Check that value is one of the recognised marker types."""
    return isinstance(value, type) and value in RANDOM_MARKERS
