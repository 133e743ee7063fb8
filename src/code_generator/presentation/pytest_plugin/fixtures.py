"""pytest fixtures for stub class generation.

User overrides generator_config or random_source in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from code_generator.domain.model.configuration import DEFAULT_CLASS_NAME, GeneratorConfig
from code_generator.infrastructure.random_sources import SecretsRandomSource, SeededRandomSource
from code_generator.presentation.api.generator import Generator

if TYPE_CHECKING:
    from collections.abc import Callable

    from code_generator.domain.ports.random_source import RandomSource


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture
def generator_config(request: pytest.FixtureRequest) -> GeneratorConfig:
    """Default generator configuration.

    Reads code_generator_class_name from pytest.ini.

    Returns:
        GeneratorConfig with defaults
    """
    class_name = _get_ini_value(request.config, "code_generator_class_name", DEFAULT_CLASS_NAME)
    return GeneratorConfig(class_name=class_name)


@pytest.fixture
def random_source(request: pytest.FixtureRequest) -> RandomSource:
    """Random source for generated return values.

    Seeded (fresh per test) when code_generator_seed is configured,
    secrets-backed otherwise.

    Raises:
        pytest.UsageError: If code_generator_seed is not an integer
    """
    seed = _get_ini_value(request.config, "code_generator_seed", "")
    if not seed:
        return SecretsRandomSource()
    try:
        return SeededRandomSource(int(seed))
    except ValueError:
        raise pytest.UsageError(f"code_generator_seed must be an integer, got {seed!r}") from None


@pytest.fixture
def class_generator(
    generator_config: GeneratorConfig,
    random_source: RandomSource,
) -> Callable[[], Generator]:
    """Factory for fresh generators sharing the fixture config and source.

    Returns:
        Zero-argument callable returning a new Generator
    """

    def _make() -> Generator:
        return Generator(config=generator_config, random_source=random_source)

    return _make
