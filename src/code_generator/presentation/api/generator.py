"""Declarative DSL for generating stub classes.

Entry point for declaring methods and building classes.

Example:
    def declare(g: Generator) -> None:
        g.public_method("greet", lambda m: (
            m.required("name")
            .optional("greeting", "Hello")
            .keyword_required("format")
            .returns(True)
        ))
        g.private_method("secret", lambda m: m.returns(42))
        g.public_class_method("token", lambda m: m.returns(str).generate())

    Greeter = generate_class(declare)
    Greeter().greet("Alice", format="json")   # True
    Greeter().greet("Alice")                  # ArityError
    Greeter().secret()                        # AccessError
    send(Greeter(), "secret")                 # 42
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Self

from code_generator.application.class_builder import build_class
from code_generator.application.stub_method import StubClassMethod, StubMethod
from code_generator.domain.exceptions import DuplicateMethodError
from code_generator.domain.model.configuration import GeneratorConfig
from code_generator.domain.model.enums import Visibility
from code_generator.domain.model.method_config import MethodConfig
from code_generator.infrastructure.random_sources import SecretsRandomSource

if TYPE_CHECKING:
    from collections.abc import Callable

    from code_generator.domain.model.method_config import MethodDefinition
    from code_generator.domain.ports.random_source import RandomSource

logger = logging.getLogger(__name__)

type Configure = Callable[[MethodConfig], object]
type Session = Callable[[Generator], object]


class Generator:
    """Declaration session producing stub classes.

    States:
        configuring: declarations accepted
        built: at least one class produced; declarations still accepted
               and only affect later builds

    Declarations are frozen when appended, so build() never observes
    later mutation of a MethodConfig.

    Not safe for concurrent use from several threads.

    Attributes:
        _methods: Instance-level definitions, declaration order
        _class_methods: Class-level definitions, declaration order
        _config: Class name and random ranges
        _source: Random source shared by built classes
    """

    __slots__ = ("_built", "_class_methods", "_config", "_methods", "_source")

    def __init__(
        self,
        *,
        config: GeneratorConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        """Initialize empty generator.

        Args:
            config: Generator settings (defaults if None)
            random_source: Random source (SecretsRandomSource if None)
        """
        self._config = config if config is not None else GeneratorConfig()
        self._source: RandomSource = (
            random_source if random_source is not None else SecretsRandomSource()
        )
        self._methods: list[MethodDefinition] = []
        self._class_methods: list[MethodDefinition] = []
        self._built = 0

    @classmethod
    def define(
        cls,
        session: Session,
        *,
        config: GeneratorConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> Self:
        """Open session and run declarations synchronously.

        Args:
            session: Called once with the new generator
            config: Generator settings
            random_source: Random source

        Returns:
            Generator holding the session's declarations
        """
        generator = cls(config=config, random_source=random_source)
        session(generator)
        return generator

    @property
    def config(self) -> GeneratorConfig:
        """Generator settings."""
        return self._config

    @property
    def methods(self) -> tuple[MethodDefinition, ...]:
        """Instance-level declarations."""
        return tuple(self._methods)

    @property
    def class_methods(self) -> tuple[MethodDefinition, ...]:
        """Class-level declarations."""
        return tuple(self._class_methods)

    @property
    def is_built(self) -> bool:
        """At least one class was built."""
        return self._built > 0

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def public_method(self, name: str, configure: Configure | None = None) -> None:
        """Declare public instance method."""
        self._declare(name, Visibility.PUBLIC, configure)

    def private_method(self, name: str, configure: Configure | None = None) -> None:
        """Declare private instance method (generated class only)."""
        self._declare(name, Visibility.PRIVATE, configure)

    def protected_method(self, name: str, configure: Configure | None = None) -> None:
        """Declare protected instance method (generated class and subclasses)."""
        self._declare(name, Visibility.PROTECTED, configure)

    def public_class_method(self, name: str, configure: Configure | None = None) -> None:
        """Declare public class method."""
        self._declare(name, Visibility.PUBLIC_CLASS, configure)

    def private_class_method(self, name: str, configure: Configure | None = None) -> None:
        """Declare private class method."""
        self._declare(name, Visibility.PRIVATE_CLASS, configure)

    def build(self) -> type:
        """Materialize new class from current declarations.

        Returns:
            Fresh class; repeated calls never return the same class
        """
        klass = build_class(
            (*self._methods, *self._class_methods),
            config=self._config,
            source=self._source,
        )
        self._built += 1
        return klass

    def _declare(
        self,
        name: str,
        visibility: Visibility,
        configure: Configure | None,
    ) -> None:
        """Create config, run callback, freeze and append.

        Raises:
            InvalidIdentifierError: If name is not an identifier
            DuplicateMethodError: If name is already declared
        """
        method_config = MethodConfig(name, visibility)
        if any(d.name == method_config.name for d in (*self._methods, *self._class_methods)):
            raise DuplicateMethodError(method_config.name)

        if configure is not None:
            configure(method_config)

        definition = method_config.freeze()
        target = self._class_methods if visibility.is_class_level else self._methods
        target.append(definition)
        logger.debug(
            "declared %s %s%s", visibility.value, definition.name, definition.render_signature()
        )


def generate_class(
    session: Session,
    *,
    config: GeneratorConfig | None = None,
    random_source: RandomSource | None = None,
) -> type:
    """Declare and build in one step.

    Args:
        session: Called once with a new Generator
        config: Generator settings
        random_source: Random source

    Returns:
        Built class
    """
    return Generator.define(session, config=config, random_source=random_source).build()


def send(target: object, name: str, /, *args: object, **kwargs: object) -> object:
    """Invoke member bypassing visibility, the internal call path.

    Arity is still enforced. Instance members are reachable through an
    instance only, class members through the class only. Attributes
    that are not generated members are called normally.

    Args:
        target: Instance or generated class
        name: Member name
        *args: Positional arguments
        **kwargs: Keyword arguments

    Returns:
        Member return value

    Raises:
        AttributeError: If no such member exists for target
        ArityError: If arguments do not match the declared signature
    """
    member = inspect.getattr_static(target, name, None)
    if isinstance(member, StubMethod):
        class_level = isinstance(member, StubClassMethod)
        if class_level != isinstance(target, type):
            kind = "Class" if class_level else "Instance"
            raise AttributeError(f"{kind} method {name!r} is not callable on {target!r}")
        return member.invoke(args, kwargs)
    return getattr(target, name)(*args, **kwargs)
