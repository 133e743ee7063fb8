"""Domain model: value objects and the method declaration builder."""

from code_generator.domain.model.configuration import GeneratorConfig
from code_generator.domain.model.enums import ParameterKind, Visibility
from code_generator.domain.model.markers import RANDOM_MARKERS, Symbol, is_random_marker
from code_generator.domain.model.method_config import MethodConfig, MethodDefinition
from code_generator.domain.model.parameter import Parameter

__all__ = [
    "RANDOM_MARKERS",
    "GeneratorConfig",
    "MethodConfig",
    "MethodDefinition",
    "Parameter",
    "ParameterKind",
    "Symbol",
    "Visibility",
    "is_random_marker",
]
