"""Declarative API for stub class generation.

Public exports:
    Generator: Declaration session, builds classes
    generate_class: Declare and build in one step
    send: Internal call path bypassing visibility
"""

from code_generator.presentation.api.generator import Generator, generate_class, send

__all__ = [
    "Generator",
    "generate_class",
    "send",
]
