"""Domain exceptions: all public errors of code_generator.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Presentation use these, not define their own public exceptions.

Every error inherits CodeGeneratorError plus the builtin that matches its
meaning, so callers may catch either.
"""

from __future__ import annotations


class CodeGeneratorError(Exception):
    """Base for all code_generator error exceptions.

    Allows: except CodeGeneratorError to catch all library errors.
    """


# =============================================================================
# Configuration errors (raised while declaring)
# =============================================================================


class InvalidParameterKindError(CodeGeneratorError, ValueError):
    """Parameter kind outside the enumerated set.

    Attributes:
        kind: Rejected kind value.
    """

    def __init__(self, kind: object) -> None:
        """Initialize with rejected kind."""
        self.kind = kind
        super().__init__(f"Invalid parameter kind: {kind!r}")


class InvalidIdentifierError(CodeGeneratorError, ValueError):
    """Name is not an acceptable identifier token.

    Attributes:
        name: Rejected name.
        role: What the name was for ("parameter", "method", "class").
    """

    def __init__(self, name: object, role: str) -> None:
        """Initialize with rejected name and its role."""
        self.name = name
        self.role = role
        super().__init__(f"{role.capitalize()} name must be a valid identifier, got {name!r}")


class InvalidVisibilityError(CodeGeneratorError, ValueError):
    """Visibility outside the enumerated set.

    Attributes:
        visibility: Rejected visibility value.
    """

    def __init__(self, visibility: object) -> None:
        """Initialize with rejected visibility."""
        self.visibility = visibility
        super().__init__(f"Invalid visibility: {visibility!r}")


class ParameterOrderError(CodeGeneratorError, ValueError):
    """Parameter declared out of signature order.

    Order is: required positionals, optional positionals, keyword parameters.

    Attributes:
        method: Method being declared.
        parameter: Offending parameter name.
        reason: Which ordering rule was broken.
    """

    def __init__(self, *, method: str, parameter: str, reason: str) -> None:
        """Initialize with method, parameter and broken rule."""
        self.method = method
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Parameter '{parameter}' of '{method}': {reason}")


class DuplicateParameterError(CodeGeneratorError, ValueError):
    """Parameter name already used in the same signature.

    Attributes:
        method: Method being declared.
        parameter: Duplicated name.
    """

    def __init__(self, *, method: str, parameter: str) -> None:
        """Initialize with method and duplicated parameter name."""
        self.method = method
        self.parameter = parameter
        super().__init__(f"Duplicate parameter '{parameter}' in '{method}'")


class DuplicateMethodError(CodeGeneratorError, ValueError):
    """Method name declared twice on one generator.

    Instance and class members share a single class namespace.

    Attributes:
        name: Duplicated method name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with duplicated method name."""
        self.name = name
        super().__init__(f"Method '{name}' is already declared")


class InvalidConfigError(CodeGeneratorError, ValueError):
    """GeneratorConfig field has an invalid value.

    Attributes:
        field: Field name.
        reason: Why the value is invalid.
    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize with field name and reason."""
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid config '{field}': {reason}")


# =============================================================================
# Invocation errors (raised by generated members)
# =============================================================================


class ArityError(CodeGeneratorError, TypeError):
    """Generated member called with the wrong arguments.

    Inherits TypeError: a hand-written method raises TypeError too.
    Preserves the binding failure via __cause__.

    Attributes:
        method: Called member name.
        signature: Declared signature as text.
        reason: Binding failure description.
    """

    def __init__(self, *, method: str, signature: str, reason: str) -> None:
        """Initialize with member name, signature and binding failure."""
        self.method = method
        self.signature = signature
        self.reason = reason
        super().__init__(f"{method}{signature}: {reason}")


class AccessError(CodeGeneratorError, AttributeError):
    """Private or protected member called from a disallowed context.

    Inherits AttributeError: to the caller the member is not public.

    Attributes:
        method: Called member name.
        visibility: Declared visibility value.
        owner: Name of the generated class.
    """

    def __init__(self, *, method: str, visibility: str, owner: str) -> None:
        """Initialize with member name, visibility and owner class name."""
        self.method = method
        self.visibility = visibility
        self.owner = owner
        super().__init__(f"{visibility} method '{method}' called for {owner}")
