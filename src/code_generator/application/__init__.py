"""Application layer: materialization of declarations into classes.

Components:
- return_resolver: Return value resolution and random generation
- access: Visibility enforcement from the calling frame
- stub_method: Member descriptors with arity enforcement
- class_builder: Class composition and member introspection
"""

from code_generator.application.access import check_access
from code_generator.application.class_builder import build_class, stub_members, visibility_of
from code_generator.application.return_resolver import make_resolver, random_value
from code_generator.application.stub_method import StubClassMethod, StubMethod, make_member

__all__ = [
    "StubClassMethod",
    "StubMethod",
    "build_class",
    "check_access",
    "make_member",
    "make_resolver",
    "random_value",
    "stub_members",
    "visibility_of",
]
