"""Member descriptors for generated classes.

Each declared method becomes a descriptor holding its frozen
definition. Visibility is metadata on the descriptor; the owner class
is bound by __set_name__ when the class is created, so the class is
never mutated after construction.

Call path:
    obj.greet("Alice", format="json")
        → stub(obj, "Alice", format="json")
        → check_access (caller frame)
        → Signature.bind (arity)
        → resolver()

No source text is assembled or evaluated: arity comes from an
inspect.Signature built from the Parameter list.
"""

from __future__ import annotations

import sys
from types import MethodType
from typing import TYPE_CHECKING, Any

from code_generator.application.access import check_access
from code_generator.domain.exceptions import ArityError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from code_generator.application.return_resolver import ReturnResolver
    from code_generator.domain.model.method_config import MethodDefinition


class StubMethod:
    """Instance-level generated member (public, private or protected).

    Attributes:
        definition: Frozen declaration
        function: Underlying function; first argument is the receiver
        owner: Generated class, None until the class is created
    """

    __slots__ = ("_resolver", "_signature", "definition", "function", "owner")

    def __init__(self, definition: MethodDefinition, resolver: ReturnResolver) -> None:
        """Initialize descriptor.

        Args:
            definition: Frozen declaration
            resolver: Produces the return value on each call
        """
        self.definition = definition
        self.owner: type | None = None
        self._resolver = resolver
        self._signature = definition.signature
        self.function = self._make_function()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.definition.visibility.value} {self.definition.name}>"

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.function.__qualname__ = f"{owner.__qualname__}.{name}"

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self.function
        return MethodType(self.function, instance)

    def invoke(self, args: tuple[object, ...], kwargs: Mapping[str, object]) -> object:
        """Validate arguments against declared signature and resolve return value.

        Argument values are never consulted.

        Raises:
            ArityError: If arguments do not bind to the signature
        """
        try:
            self._signature.bind(*args, **kwargs)
        except TypeError as exc:
            raise ArityError(
                method=self.definition.name,
                signature=str(self._signature),
                reason=str(exc),
            ) from exc
        return self._resolver()

    def _make_function(self) -> Callable[..., object]:
        descriptor = self
        definition = self.definition

        def stub(receiver: object, /, *args: object, **kwargs: object) -> object:
            # SLF001: frame 1 is whoever called the stub
            caller = sys._getframe(1)  # noqa: SLF001
            owner = descriptor.owner
            if owner is None:
                owner = receiver if isinstance(receiver, type) else type(receiver)
            check_access(definition, owner, caller)
            return descriptor.invoke(args, kwargs)

        stub.__name__ = definition.name
        stub.__qualname__ = definition.name
        stub.__doc__ = (
            f"Generated {definition.visibility.value} stub {definition.render_signature()}."
        )
        stub.__signature__ = definition.full_signature  # type: ignore[attr-defined]
        stub.__stub_definition__ = definition  # type: ignore[attr-defined]
        return stub


class StubClassMethod(StubMethod):
    """Class-level generated member (public_class or private_class).

    Binds to the class, also when looked up through an instance.
    """

    __slots__ = ()

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        return MethodType(self.function, owner if owner is not None else type(instance))


def make_member(definition: MethodDefinition, resolver: ReturnResolver) -> StubMethod:
    """Create descriptor matching definition visibility level."""
    if definition.visibility.is_class_level:
        return StubClassMethod(definition, resolver)
    return StubMethod(definition, resolver)
