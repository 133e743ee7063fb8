"""Tests for application/stub_method.py."""

import inspect

import pytest

from code_generator.application.stub_method import StubClassMethod, StubMethod, make_member
from code_generator.domain.exceptions import AccessError, ArityError
from code_generator.domain.model.enums import Visibility
from code_generator.domain.model.method_config import MethodConfig, MethodDefinition
from tests.factories import make_class, make_definition


def _process_definition(visibility: Visibility = Visibility.PUBLIC) -> MethodDefinition:
    return (
        MethodConfig("process", visibility)
        .required("id")
        .optional("page", 1)
        .keyword_required("action")
        .keyword("fmt", "json")
        .returns(True)
        .freeze()
    )


class TestMakeMember:
    """Tests for make_member()."""

    @pytest.mark.parametrize(
        "visibility", [Visibility.PUBLIC, Visibility.PRIVATE, Visibility.PROTECTED]
    )
    def test_instance_level(self, visibility: Visibility) -> None:
        member = make_member(make_definition(visibility=visibility), lambda: None)
        assert type(member) is StubMethod

    @pytest.mark.parametrize("visibility", [Visibility.PUBLIC_CLASS, Visibility.PRIVATE_CLASS])
    def test_class_level(self, visibility: Visibility) -> None:
        member = make_member(make_definition(visibility=visibility), lambda: None)
        assert type(member) is StubClassMethod


class TestStubMethodInvoke:
    """Tests for StubMethod.invoke() arity enforcement."""

    @pytest.fixture
    def member(self) -> StubMethod:
        return StubMethod(_process_definition(), lambda: "result")

    def test_minimal_call(self, member: StubMethod) -> None:
        assert member.invoke((1,), {"action": "create"}) == "result"

    def test_full_call(self, member: StubMethod) -> None:
        assert member.invoke((1, 2), {"action": "update", "fmt": "xml"}) == "result"

    def test_positional_by_name(self, member: StubMethod) -> None:
        assert member.invoke((), {"id": 1, "action": "create"}) == "result"

    @pytest.mark.parametrize(
        ("args", "kwargs", "reason"),
        [
            ((), {"action": "a"}, "missing a required argument: 'id'"),
            ((1,), {}, "missing a required argument: 'action'"),
            ((1, 2, 3), {"action": "a"}, "too many positional arguments"),
            ((1,), {"action": "a", "extra": 1}, "got an unexpected keyword argument 'extra'"),
            ((1, "x"), {"action": "a", "page": 2}, "multiple values for argument 'page'"),
        ],
    )
    def test_arity_errors(
        self,
        member: StubMethod,
        args: tuple[object, ...],
        kwargs: dict[str, object],
        reason: str,
    ) -> None:
        with pytest.raises(ArityError, match=reason) as exc_info:
            member.invoke(args, kwargs)
        assert exc_info.value.method == "process"
        assert exc_info.value.signature == "(id, page=1, *, action, fmt='json')"
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_keyword_not_accepted_positionally(self, member: StubMethod) -> None:
        with pytest.raises(ArityError):
            member.invoke((1, 2, "create"), {})

    def test_resolver_called_per_invoke(self) -> None:
        counter = iter(range(100))
        member = StubMethod(make_definition(), lambda: next(counter))
        assert [member.invoke((), {}) for _ in range(3)] == [0, 1, 2]

    def test_resolver_not_called_on_arity_error(self) -> None:
        calls: list[int] = []
        member = StubMethod(make_definition(required=("x",)), lambda: calls.append(1))
        with pytest.raises(ArityError):
            member.invoke((), {})
        assert calls == []


class TestStubMethodDescriptor:
    """Tests for descriptor binding inside a generated class."""

    def test_owner_bound_by_set_name(self) -> None:
        klass = make_class(make_definition("hello", returns="world"))
        member = vars(klass)["hello"]
        assert member.owner is klass

    def test_instance_access_returns_bound_method(self) -> None:
        klass = make_class(make_definition("hello", returns="world"))
        obj = klass()
        assert inspect.ismethod(obj.hello)
        assert obj.hello.__self__ is obj
        assert obj.hello() == "world"

    def test_class_access_returns_function(self) -> None:
        klass = make_class(make_definition("hello", returns="world"))
        assert inspect.isfunction(klass.hello)
        assert klass.hello(klass()) == "world"

    def test_function_metadata(self) -> None:
        klass = make_class(make_definition("hello", required=("x",)), class_name="Greeter")
        assert klass.hello.__name__ == "hello"
        assert klass.hello.__qualname__ == "Greeter.hello"
        assert klass.hello.__stub_definition__.name == "hello"
        assert "public" in klass.hello.__doc__

    def test_bound_signature(self) -> None:
        klass = make_class(_process_definition())
        assert str(inspect.signature(klass().process)) == "(id, page=1, *, action, fmt='json')"

    def test_unbound_signature_has_receiver(self) -> None:
        klass = make_class(_process_definition())
        assert str(inspect.signature(klass.process)) == "(self, /, id, page=1, *, action, fmt='json')"

    def test_repr(self) -> None:
        member = StubMethod(make_definition("secret", Visibility.PRIVATE), lambda: None)
        assert repr(member) == "<StubMethod private secret>"


class TestStubClassMethodDescriptor:
    """Tests for class-level descriptor binding."""

    def test_binds_to_class(self) -> None:
        klass = make_class(make_definition("helper", Visibility.PUBLIC_CLASS, returns="ok"))
        assert klass.helper.__self__ is klass
        assert klass.helper() == "ok"

    def test_binds_to_class_through_instance(self) -> None:
        klass = make_class(make_definition("helper", Visibility.PUBLIC_CLASS, returns="ok"))
        assert klass().helper.__self__ is klass

    def test_binds_to_subclass(self) -> None:
        klass = make_class(make_definition("helper", Visibility.PUBLIC_CLASS))
        sub = type("Sub", (klass,), {})
        assert sub.helper.__self__ is sub

    def test_signature(self) -> None:
        definition = MethodConfig("build", "public_class").required("x").keyword("y", 2).freeze()
        klass = make_class(definition)
        assert str(inspect.signature(klass.build)) == "(x, *, y=2)"


class TestStubCallOrder:
    """Access is checked before arity."""

    def test_access_error_wins_over_arity(self) -> None:
        klass = make_class(make_definition("secret", Visibility.PRIVATE, required=("x",)))
        with pytest.raises(AccessError):
            klass().secret(1, 2, 3)
