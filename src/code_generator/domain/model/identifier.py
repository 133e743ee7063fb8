"""Identifier validation shared by parameter, method and class names."""

from __future__ import annotations

import keyword
from typing import TypeGuard

from code_generator.domain.exceptions import InvalidIdentifierError


def is_identifier(name: object) -> TypeGuard[str]:
    """Check that name is a usable bare Python name.

    Args:
        name: Candidate name (any object)

    Returns:
        True for non-keyword identifiers, False otherwise
    """
    return isinstance(name, str) and name.isidentifier() and not keyword.iskeyword(name)


def validate_identifier(name: object, role: str) -> str:
    """Validate name and return it typed as str.

    Args:
        name: Candidate name
        role: What the name is for, used in the error message

    Returns:
        The validated name

    Raises:
        InvalidIdentifierError: If name is not a non-keyword identifier
    """
    if not is_identifier(name):
        raise InvalidIdentifierError(name, role)
    return name
