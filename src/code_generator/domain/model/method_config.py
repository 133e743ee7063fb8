"""Method declaration builder and its frozen snapshot.

MethodConfig is the mutable builder handed to a declaration callback.
MethodDefinition is the immutable snapshot the class builder reads.

Signature order is enforced while declaring:
    required positionals → optional positionals → keyword parameters
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Self

from code_generator.domain.exceptions import (
    DuplicateParameterError,
    InvalidIdentifierError,
    InvalidVisibilityError,
    ParameterOrderError,
)
from code_generator.domain.model.enums import ParameterKind, Visibility
from code_generator.domain.model.identifier import validate_identifier
from code_generator.domain.model.markers import is_random_marker
from code_generator.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class MethodDefinition:
    """Immutable method declaration.

    Attributes:
        name: Method name
        visibility: Declared visibility
        parameters: Parameters in call-signature order
        return_value: Literal value or random marker
        generate_random: Random generation requested
    """

    name: str
    visibility: Visibility
    parameters: tuple[Parameter, ...] = ()
    return_value: object = None
    generate_random: bool = False

    @property
    def wants_random(self) -> bool:
        """Return value is produced freshly on every call."""
        return self.generate_random and is_random_marker(self.return_value)

    @property
    def signature(self) -> inspect.Signature:
        """Signature of the bound member (receiver excluded)."""
        return inspect.Signature([p.to_inspect() for p in self.parameters])

    @property
    def full_signature(self) -> inspect.Signature:
        """Signature of the underlying function (receiver included)."""
        receiver = inspect.Parameter(self.visibility.receiver, inspect.Parameter.POSITIONAL_ONLY)
        return inspect.Signature([receiver, *(p.to_inspect() for p in self.parameters)])

    def render_signature(self) -> str:
        """Signature as rendered parameter fragments, e.g. "(x, y = 10, fmt:)"."""
        return "(" + ", ".join(p.render() for p in self.parameters) + ")"


class MethodConfig:
    """Mutable builder for one method declaration.

    Every verb returns the builder, so calls chain:

        m.required("name").keyword("timeout", 30).returns(True)

    Not thread-safe.
    """

    __slots__ = ("_generate_random", "_name", "_parameters", "_return_value", "_visibility")

    def __init__(self, name: str, visibility: Visibility | str) -> None:
        """Initialize empty declaration.

        Args:
            name: Method name, a non-keyword, non-dunder identifier
            visibility: Visibility or its string value

        Raises:
            InvalidIdentifierError: If name is not an identifier
            InvalidVisibilityError: If visibility is not recognised
        """
        self._name = validate_identifier(name, "method")
        if self._name.startswith("__") and self._name.endswith("__"):
            raise InvalidIdentifierError(name, "method")
        self._visibility = _coerce_visibility(visibility)
        self._parameters: list[Parameter] = []
        self._return_value: object = None
        self._generate_random = False

    def __repr__(self) -> str:
        return f"MethodConfig({self._name!r}, {self._visibility.value!r})"

    @property
    def name(self) -> str:
        """Method name."""
        return self._name

    @property
    def visibility(self) -> Visibility:
        """Declared visibility."""
        return self._visibility

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """Parameters declared so far, in order."""
        return tuple(self._parameters)

    @property
    def return_value(self) -> object:
        """Configured return value or marker."""
        return self._return_value

    @property
    def generate_random(self) -> bool:
        """Random generation flag."""
        return self._generate_random

    # -------------------------------------------------------------------------
    # Parameter verbs
    # -------------------------------------------------------------------------

    def required(self, name: str) -> Self:
        """Append required positional parameter."""
        return self._append(Parameter(ParameterKind.REQUIRED, name))

    def optional(self, name: str, default: object = None) -> Self:
        """Append optional positional parameter."""
        return self._append(Parameter(ParameterKind.OPTIONAL, name, default))

    def keyword_required(self, name: str) -> Self:
        """Append required keyword-only parameter."""
        return self._append(Parameter(ParameterKind.KEYWORD_REQUIRED, name))

    def keyword(self, name: str, default: object = None) -> Self:
        """Append optional keyword-only parameter."""
        return self._append(Parameter(ParameterKind.KEYWORD, name, default))

    # -------------------------------------------------------------------------
    # Return verbs
    # -------------------------------------------------------------------------

    def returns(self, value: object) -> Self:
        """Set literal return value, or a marker type (int, str, Symbol).

        A marker only yields random values once generate() is enabled.
        """
        self._return_value = value
        return self

    def generate(self, enabled: bool = True) -> Self:
        """Toggle random generation for marker return values."""
        self._generate_random = bool(enabled)
        return self

    def freeze(self) -> MethodDefinition:
        """Snapshot current state as an immutable MethodDefinition."""
        return MethodDefinition(
            name=self._name,
            visibility=self._visibility,
            parameters=tuple(self._parameters),
            return_value=self._return_value,
            generate_random=self._generate_random,
        )

    def _append(self, parameter: Parameter) -> Self:
        """Validate ordering against declared parameters, then append.

        Raises:
            DuplicateParameterError: Name reused or equal to the receiver name
            ParameterOrderError: Parameter breaks signature order
        """
        taken = {p.name for p in self._parameters} | {self._visibility.receiver}
        if parameter.name in taken:
            raise DuplicateParameterError(method=self._name, parameter=parameter.name)

        if self._parameters:
            last = self._parameters[-1].kind
            if not parameter.kind.is_keyword and last.is_keyword:
                raise ParameterOrderError(
                    method=self._name,
                    parameter=parameter.name,
                    reason="positional parameter after keyword parameter",
                )
            if parameter.kind is ParameterKind.REQUIRED and last is ParameterKind.OPTIONAL:
                raise ParameterOrderError(
                    method=self._name,
                    parameter=parameter.name,
                    reason="required parameter after optional parameter",
                )

        self._parameters.append(parameter)
        return self


def _coerce_visibility(visibility: object) -> Visibility:
    if isinstance(visibility, Visibility):
        return visibility
    try:
        return Visibility(visibility)
    except ValueError:
        raise InvalidVisibilityError(visibility) from None
