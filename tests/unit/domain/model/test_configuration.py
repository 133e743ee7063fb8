"""Tests for domain/model/configuration.py."""

import pytest

from code_generator.domain.exceptions import InvalidConfigError
from code_generator.domain.model.configuration import GeneratorConfig


class TestGeneratorConfigDefaults:
    """Tests for default values."""

    def test_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.class_name == "GeneratedClass"
        assert config.integer_min == 1
        assert config.integer_max == 1_000_000
        assert config.string_length == 10

    def test_is_frozen(self) -> None:
        config = GeneratorConfig()
        with pytest.raises(AttributeError):
            config.string_length = 5  # type: ignore[misc]


class TestGeneratorConfigFailFirst:
    """Tests for FAIL-FIRST validation in GeneratorConfig."""

    @pytest.mark.parametrize("name", ["", "Two Words", "class", "1Stub"])
    def test_invalid_class_name(self, name: str) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            GeneratorConfig(class_name=name)
        assert exc_info.value.field == "class_name"

    def test_integer_min_below_one(self) -> None:
        with pytest.raises(InvalidConfigError, match="integer_min"):
            GeneratorConfig(integer_min=0)

    def test_integer_max_below_min(self) -> None:
        with pytest.raises(InvalidConfigError, match="integer_max"):
            GeneratorConfig(integer_min=10, integer_max=9)

    def test_equal_bounds_allowed(self) -> None:
        config = GeneratorConfig(integer_min=7, integer_max=7)
        assert config.integer_min == config.integer_max == 7

    def test_string_length_zero(self) -> None:
        with pytest.raises(InvalidConfigError, match="string_length"):
            GeneratorConfig(string_length=0)

    @pytest.mark.parametrize("field", ["integer_min", "integer_max", "string_length"])
    @pytest.mark.parametrize("value", ["5", 5.0, True, None])
    def test_non_int_rejected(self, field: str, value: object) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            GeneratorConfig(**{field: value})  # type: ignore[arg-type]
        assert exc_info.value.field == field

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            GeneratorConfig(string_length=-1)
