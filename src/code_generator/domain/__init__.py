"""code_generator domain layer.

Pure declaration model with no external dependencies.
Only imports: typing, dataclasses, enum, inspect, keyword, sys
"""

from code_generator.domain.exceptions import (
    AccessError,
    ArityError,
    CodeGeneratorError,
    DuplicateMethodError,
    DuplicateParameterError,
    InvalidConfigError,
    InvalidIdentifierError,
    InvalidParameterKindError,
    InvalidVisibilityError,
    ParameterOrderError,
)
from code_generator.domain.model import (
    GeneratorConfig,
    MethodConfig,
    MethodDefinition,
    Parameter,
    ParameterKind,
    Symbol,
    Visibility,
)
from code_generator.domain.ports import RandomSource

__all__ = [
    # Model
    "GeneratorConfig",
    "MethodConfig",
    "MethodDefinition",
    "Parameter",
    "ParameterKind",
    "Symbol",
    "Visibility",
    # Ports
    "RandomSource",
    # Exceptions
    "AccessError",
    "ArityError",
    "CodeGeneratorError",
    "DuplicateMethodError",
    "DuplicateParameterError",
    "InvalidConfigError",
    "InvalidIdentifierError",
    "InvalidParameterKindError",
    "InvalidVisibilityError",
    "ParameterOrderError",
]
