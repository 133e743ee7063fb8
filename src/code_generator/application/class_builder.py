"""Class composition from method definitions.

The namespace is assembled first and the class is created in one
type() call. Descriptors receive their owner through __set_name__.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from code_generator.application.return_resolver import make_resolver
from code_generator.application.stub_method import StubMethod, make_member

if TYPE_CHECKING:
    from collections.abc import Iterable

    from code_generator.domain.model.configuration import GeneratorConfig
    from code_generator.domain.model.enums import Visibility
    from code_generator.domain.model.method_config import MethodDefinition
    from code_generator.domain.ports.random_source import RandomSource

logger = logging.getLogger(__name__)


def build_class(
    definitions: Iterable[MethodDefinition],
    *,
    config: GeneratorConfig,
    source: RandomSource,
) -> type:
    """Create new class with one member per definition.

    Every call creates fresh descriptors and resolvers; built classes
    share nothing mutable.

    Args:
        definitions: Instance- and class-level declarations
        config: Class name, random ranges
        source: Random source for marker return values

    Returns:
        Newly created class
    """
    namespace: dict[str, object] = {
        "__module__": __name__,
        "__qualname__": config.class_name,
        "__doc__": f"Generated stub class {config.class_name}.",
    }
    count = 0
    for definition in definitions:
        namespace[definition.name] = make_member(
            definition, make_resolver(definition, source, config)
        )
        count += 1

    klass = type(config.class_name, (), namespace)
    logger.debug("built %s with %d members", config.class_name, count)
    return klass


def stub_members(klass: type) -> dict[str, StubMethod]:
    """Generated members visible on klass, shadowed ones excluded.

    Args:
        klass: Generated class or any subclass of one

    Returns:
        Member name → descriptor
    """
    members: dict[str, StubMethod] = {}
    seen: set[str] = set()
    for cls in klass.__mro__:
        for name, member in vars(cls).items():
            if name in seen:
                continue
            seen.add(name)
            if isinstance(member, StubMethod):
                members[name] = member
    return members


def visibility_of(klass: type, name: str) -> Visibility:
    """Declared visibility of generated member.

    Args:
        klass: Generated class or subclass
        name: Member name

    Returns:
        Declared Visibility

    Raises:
        AttributeError: If name is not a generated member of klass
    """
    member = stub_members(klass).get(name)
    if member is None:
        raise AttributeError(f"{klass.__name__!r} has no generated member {name!r}")
    return member.definition.visibility
