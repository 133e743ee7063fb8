"""code_generator - stub classes from declarative method descriptions."""

__version__ = "0.1.0"

from code_generator.application.class_builder import visibility_of
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
from code_generator.infrastructure.random_sources import SecretsRandomSource, SeededRandomSource
from code_generator.presentation.api.generator import Generator, generate_class, send

__all__ = [
    "Generator",
    "GeneratorConfig",
    "MethodConfig",
    "MethodDefinition",
    "Parameter",
    "ParameterKind",
    "SecretsRandomSource",
    "SeededRandomSource",
    "Symbol",
    "Visibility",
    "__version__",
    "generate_class",
    "send",
    "visibility_of",
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
