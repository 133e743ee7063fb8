"""Domain enumerations."""

from enum import Enum


class ParameterKind(Enum):
    """Declared parameter kind.

    Values double as the DSL verb names on MethodConfig.
    """

    REQUIRED = "required"  # x
    OPTIONAL = "optional"  # x = default
    KEYWORD_REQUIRED = "keyword_required"  # x:
    KEYWORD = "keyword"  # x: default

    @property
    def is_keyword(self) -> bool:
        """Keyword-only in the generated signature."""
        return self in (ParameterKind.KEYWORD_REQUIRED, ParameterKind.KEYWORD)

    @property
    def has_default(self) -> bool:
        """Default value is applied for this kind."""
        return self in (ParameterKind.OPTIONAL, ParameterKind.KEYWORD)


class Visibility(Enum):
    """Declared member visibility."""

    PUBLIC = "public"
    PRIVATE = "private"  # generated class only
    PROTECTED = "protected"  # generated class and subclasses
    PUBLIC_CLASS = "public_class"
    PRIVATE_CLASS = "private_class"

    @property
    def is_class_level(self) -> bool:
        """Bound to the class rather than to instances."""
        return self in (Visibility.PUBLIC_CLASS, Visibility.PRIVATE_CLASS)

    @property
    def is_public(self) -> bool:
        """Callable from anywhere."""
        return self in (Visibility.PUBLIC, Visibility.PUBLIC_CLASS)

    @property
    def receiver(self) -> str:
        """Name of the implicit first parameter."""
        return "cls" if self.is_class_level else "self"
