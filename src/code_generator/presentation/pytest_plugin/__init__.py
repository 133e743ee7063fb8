"""pytest plugin for code_generator.

Provides fixtures for tests that use generated stub classes:
    generator_config: Generator settings (override in conftest.py)
    random_source: Random source (seeded when configured)
    class_generator: Factory returning fresh Generator instances

Configuration (pytest.ini or pyproject.toml):
    code_generator_seed: Integer seed for a deterministic random source
    code_generator_class_name: __name__ of generated classes
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from code_generator.presentation.pytest_plugin.fixtures import (
    class_generator,
    generator_config,
    random_source,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "class_generator",
    "generator_config",
    "random_source",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "code_generator_seed",
        "Integer seed for deterministic random return values",
        default="",
    )
    parser.addini(
        "code_generator_class_name",
        "__name__ of classes built by class_generator",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "stub: mark test as using generated stub classes",
    )
