"""Generator configuration.

Immutable configuration object with FAIL-FIRST validation.
Defaults reproduce the stock behaviour: random integers in
[1, 1_000_000] and 10-character alphanumeric strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from code_generator.domain.exceptions import InvalidConfigError
from code_generator.domain.model.identifier import is_identifier

DEFAULT_CLASS_NAME = "GeneratedClass"
DEFAULT_INTEGER_MIN = 1
DEFAULT_INTEGER_MAX = 1_000_000
DEFAULT_STRING_LENGTH = 10


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Generator settings.

    Attributes:
        class_name: __name__ of built classes
        integer_min: Lower bound (inclusive) of random integers, >= 1
        integer_max: Upper bound (inclusive) of random integers
        string_length: Length of random strings and symbols, >= 1
    """

    class_name: str = DEFAULT_CLASS_NAME
    integer_min: int = DEFAULT_INTEGER_MIN
    integer_max: int = DEFAULT_INTEGER_MAX
    string_length: int = DEFAULT_STRING_LENGTH

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not is_identifier(self.class_name):
            raise InvalidConfigError(
                "class_name", f"must be an identifier, got {self.class_name!r}"
            )

        for field in ("integer_min", "integer_max", "string_length"):
            value = getattr(self, field)
            # bool is an int subclass but never a bound or length
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigError(field, f"must be int, got {type(value).__name__}")

        if self.integer_min < 1:
            raise InvalidConfigError("integer_min", f"must be >= 1, got {self.integer_min}")

        if self.integer_max < self.integer_min:
            raise InvalidConfigError(
                "integer_max",
                f"must be >= integer_min ({self.integer_min}), got {self.integer_max}",
            )

        if self.string_length < 1:
            raise InvalidConfigError("string_length", f"must be >= 1, got {self.string_length}")
