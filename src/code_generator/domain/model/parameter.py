"""Parameter value object."""

from __future__ import annotations

import inspect
from dataclasses import dataclass

from code_generator.domain.exceptions import InvalidParameterKindError
from code_generator.domain.model.enums import ParameterKind
from code_generator.domain.model.identifier import validate_identifier


@dataclass(frozen=True, slots=True)
class Parameter:
    """One formal parameter of a generated method.

    Kind may be given as ParameterKind or its string value; it is
    stored as ParameterKind. Default is kept for every kind but only
    applied for OPTIONAL and KEYWORD.

    Examples:
        Parameter("required", "x").render()          → "x"
        Parameter("optional", "y", 10).render()      → "y = 10"
        Parameter("keyword_required", "fmt").render() → "fmt:"
        Parameter("keyword", "timeout", 30).render()  → "timeout: 30"

    Attributes:
        kind: Parameter kind
        name: Identifier
        default: Default value for OPTIONAL and KEYWORD
    """

    kind: ParameterKind
    name: str
    default: object = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "kind", _coerce_kind(self.kind))
        validate_identifier(self.name, "parameter")

    def render(self) -> str:
        """Signature fragment for this parameter.

        Defaults are rendered with repr(), a stable Python literal.
        """
        match self.kind:
            case ParameterKind.REQUIRED:
                return self.name
            case ParameterKind.OPTIONAL:
                return f"{self.name} = {self.default!r}"
            case ParameterKind.KEYWORD_REQUIRED:
                return f"{self.name}:"
            case ParameterKind.KEYWORD:
                return f"{self.name}: {self.default!r}"

    def to_inspect(self) -> inspect.Parameter:
        """Equivalent inspect.Parameter for signature construction."""
        kind = (
            inspect.Parameter.KEYWORD_ONLY
            if self.kind.is_keyword
            else inspect.Parameter.POSITIONAL_OR_KEYWORD
        )
        default = self.default if self.kind.has_default else inspect.Parameter.empty
        return inspect.Parameter(self.name, kind, default=default)


def _coerce_kind(kind: object) -> ParameterKind:
    if isinstance(kind, ParameterKind):
        return kind
    try:
        return ParameterKind(kind)
    except ValueError:
        raise InvalidParameterKindError(kind) from None
