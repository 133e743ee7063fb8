"""Tests for domain/model/enums.py."""

from code_generator.domain.model.enums import ParameterKind, Visibility


class TestParameterKind:
    """Tests for ParameterKind enum."""

    def test_has_four_members(self) -> None:
        assert len(ParameterKind) == 4

    def test_values_are_verb_names(self) -> None:
        assert {k.value for k in ParameterKind} == {
            "required",
            "optional",
            "keyword_required",
            "keyword",
        }

    def test_is_keyword(self) -> None:
        assert ParameterKind.KEYWORD.is_keyword
        assert ParameterKind.KEYWORD_REQUIRED.is_keyword
        assert not ParameterKind.REQUIRED.is_keyword
        assert not ParameterKind.OPTIONAL.is_keyword

    def test_has_default(self) -> None:
        assert ParameterKind.OPTIONAL.has_default
        assert ParameterKind.KEYWORD.has_default
        assert not ParameterKind.REQUIRED.has_default
        assert not ParameterKind.KEYWORD_REQUIRED.has_default


class TestVisibility:
    """Tests for Visibility enum."""

    def test_has_five_members(self) -> None:
        assert len(Visibility) == 5

    def test_class_level(self) -> None:
        assert {v for v in Visibility if v.is_class_level} == {
            Visibility.PUBLIC_CLASS,
            Visibility.PRIVATE_CLASS,
        }

    def test_public(self) -> None:
        assert {v for v in Visibility if v.is_public} == {
            Visibility.PUBLIC,
            Visibility.PUBLIC_CLASS,
        }

    def test_receiver(self) -> None:
        assert Visibility.PUBLIC.receiver == "self"
        assert Visibility.PROTECTED.receiver == "self"
        assert Visibility.PRIVATE_CLASS.receiver == "cls"
