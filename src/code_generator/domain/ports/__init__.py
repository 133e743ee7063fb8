"""Domain ports: interfaces implemented by infrastructure."""

from code_generator.domain.ports.random_source import RandomSource

__all__ = ["RandomSource"]
