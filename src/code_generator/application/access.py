"""Visibility enforcement for generated members.

A call is internal when the calling frame runs code defined in the
class body of an allowed class:
    PRIVATE / PRIVATE_CLASS → the generated class itself
    PROTECTED               → the generated class or any subclass

Code objects nested in a method (lambdas, inner functions) count as
the method's own code. Decorated members are unwrapped through their
__wrapped__ chain, cached_property and partialmethod through .func.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Iterator
from types import CodeType, FrameType
from typing import TYPE_CHECKING

from code_generator.domain.exceptions import AccessError
from code_generator.domain.model.enums import Visibility

if TYPE_CHECKING:
    from code_generator.domain.model.method_config import MethodDefinition


def check_access(definition: MethodDefinition, owner: type, caller: FrameType | None) -> None:
    """Raise unless caller may invoke member.

    Args:
        definition: Member declaration
        owner: Generated class the member is defined on
        caller: Frame that performed the call

    Raises:
        AccessError: If visibility forbids call from caller
    """
    if definition.visibility.is_public:
        return

    if caller is not None:
        classes = (
            _lineage(owner) if definition.visibility is Visibility.PROTECTED else (owner,)
        )
        if any(caller.f_code in _class_code(cls) for cls in classes):
            return

    raise AccessError(
        method=definition.name,
        visibility=definition.visibility.value.replace("_class", ""),
        owner=owner.__name__,
    )


def _lineage(owner: type) -> tuple[type, ...]:
    """Owner followed by all transitive subclasses."""
    found: list[type] = [owner]
    index = 0
    while index < len(found):
        for sub in found[index].__subclasses__():
            if sub not in found:
                found.append(sub)
        index += 1
    return tuple(found)


def _class_code(cls: type) -> set[CodeType]:
    """Code objects of functions defined directly on cls."""
    codes: set[CodeType] = set()
    for member in vars(cls).values():
        for func in _unwrap(member):
            code = getattr(func, "__code__", None)
            if isinstance(code, CodeType):
                codes.update(_nested(code))
    return codes


def _unwrap(member: object) -> Iterator[object]:
    """Functions behind member, every __wrapped__ layer included."""
    if isinstance(member, (classmethod, staticmethod)):
        yield from _unwrap(member.__func__)
    elif isinstance(member, (functools.cached_property, functools.partialmethod)):
        yield from _unwrap(member.func)
    elif isinstance(member, property):
        for accessor in (member.fget, member.fset, member.fdel):
            if accessor is not None:
                yield from _unwrap(accessor)
    else:
        seen: set[int] = set()
        while member is not None and id(member) not in seen:
            seen.add(id(member))
            yield member
            member = inspect.getattr_static(member, "__wrapped__", None)


def _nested(code: CodeType) -> Iterator[CodeType]:
    yield code
    for const in code.co_consts:
        if isinstance(const, CodeType):
            yield from _nested(const)
