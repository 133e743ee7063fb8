"""Return value resolution for generated members.

Resolution rule:
    generate_random and marker recognised → fresh random value per call
    otherwise                             → configured literal (None if unset)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from code_generator.domain.model.markers import Symbol

if TYPE_CHECKING:
    from code_generator.domain.model.configuration import GeneratorConfig
    from code_generator.domain.model.method_config import MethodDefinition
    from code_generator.domain.ports.random_source import RandomSource

type ReturnResolver = Callable[[], object]


def random_value(marker: object, source: RandomSource, config: GeneratorConfig) -> object:
    """Generate random value for marker.

    Args:
        marker: Marker type (int, str, Symbol) or anything else
        source: Random source
        config: Range and length settings

    Returns:
        Random int/str/Symbol, or marker unchanged if not recognised
    """
    if marker is int:
        return source.integer(config.integer_min, config.integer_max)
    if marker is str:
        return source.alphanumeric(config.string_length)
    if marker is Symbol:
        return Symbol(source.alphanumeric(config.string_length))
    return marker


def make_resolver(
    definition: MethodDefinition,
    source: RandomSource,
    config: GeneratorConfig,
) -> ReturnResolver:
    """Create zero-argument resolver called on every invocation.

    Literal values are returned by identity, never copied.

    Args:
        definition: Method declaration
        source: Random source for marker values
        config: Range and length settings

    Returns:
        Callable producing the effective return value
    """
    marker = definition.return_value
    if definition.wants_random:
        return lambda: random_value(marker, source, config)
    return lambda: marker
