"""Tests for presentation/api/generator.py send()."""

import pytest

from code_generator.domain.exceptions import ArityError
from code_generator.presentation.api.generator import Generator, send


@pytest.fixture
def klass() -> type:
    generator = Generator()
    generator.public_method("hello", lambda m: m.returns("world"))
    generator.private_method("secret", lambda m: m.returns(42))
    generator.private_method("calculate", lambda m: m.required("x").required("y").returns(100))
    generator.protected_method("internal", lambda m: m.returns("protected"))
    generator.private_class_method("internal_class_method", lambda m: m.returns("private class"))
    generator.public_class_method("helper", lambda m: m.returns("class helper"))
    return generator.build()


class TestSend:
    """Tests for send() internal call path."""

    def test_private_method(self, klass: type) -> None:
        assert send(klass(), "secret") == 42

    def test_protected_method(self, klass: type) -> None:
        assert send(klass(), "internal") == "protected"

    def test_public_method(self, klass: type) -> None:
        assert send(klass(), "hello") == "world"

    def test_private_method_with_parameters(self, klass: type) -> None:
        obj = klass()
        assert send(obj, "calculate", 1, 2) == 100
        assert send(obj, "calculate", x=1, y=2) == 100

    def test_arity_still_enforced(self, klass: type) -> None:
        with pytest.raises(ArityError):
            send(klass(), "calculate", 1)

    def test_private_class_method(self, klass: type) -> None:
        assert send(klass, "internal_class_method") == "private class"

    def test_public_class_method(self, klass: type) -> None:
        assert send(klass, "helper") == "class helper"

    def test_class_method_through_instance_raises(self, klass: type) -> None:
        with pytest.raises(AttributeError, match="Class method 'internal_class_method'"):
            send(klass(), "internal_class_method")

    def test_instance_method_through_class_raises(self, klass: type) -> None:
        with pytest.raises(AttributeError, match="Instance method 'secret'"):
            send(klass, "secret")

    def test_subclass_instance(self, klass: type) -> None:
        sub = type("Sub", (klass,), {})
        assert send(sub(), "secret") == 42

    def test_missing_attribute_raises(self, klass: type) -> None:
        with pytest.raises(AttributeError):
            send(klass(), "missing")

    def test_plain_method(self) -> None:
        assert send([3, 1, 2], "index", 2) == 2

    def test_name_is_positional_only(self) -> None:
        generator = Generator()
        generator.public_method("lookup", lambda m: m.keyword_required("name").returns("found"))
        assert send(generator.build()(), "lookup", name="x") == "found"
