import logging

import pytest

from fieldcheck.core.errors import ContractError
from fieldcheck.core.model import FieldSpec
from fieldcheck.validators.engine import deregister, get_one_result, register, validate_one


def test_register_mapping_field(registry) -> None:
    calls = []
    ok = register(registry, {"id": "age", "getter": lambda: 17, "groups": ["adult-checks"]}, [], lambda: calls.append(1))
    assert ok is True
    assert calls == [1]
    assert registry.fields["age"].display_name == "age"
    assert "age" in registry.members("adult-checks")


def test_register_object_field_with_name(registry) -> None:
    assert register(registry, FieldSpec(id="email", getter=lambda: "", name="E-mail")) is True
    assert registry.fields["email"].display_name == "E-mail"
    assert registry.fields["email"].validation_chain == []


def test_register_twice_keeps_first(registry, caplog) -> None:
    register(registry, {"id": "age", "getter": lambda: 1}, [lambda f: "first"])
    with caplog.at_level(logging.WARNING):
        second = register(registry, {"id": "age", "getter": lambda: 2}, [lambda f: "second"])
    assert not second
    assert "already been registered" in caplog.text
    assert validate_one(registry, "age") == ["first"]


@pytest.mark.parametrize(
    "field,chain,callback",
    [
        (None, None, None),
        ("age", None, None),
        ({"id": 3, "getter": lambda: 1}, None, None),
        ({"id": "", "getter": lambda: 1}, None, None),
        ({"id": "age", "getter": 1}, None, None),
        ({"id": "age", "getter": lambda: 1, "name": 5}, None, None),
        ({"id": "age", "getter": lambda: 1, "groups": "adults"}, None, None),
        ({"id": "age", "getter": lambda: 1, "groups": ["ok", 1]}, None, None),
        ({"id": "age", "getter": lambda: 1}, lambda f: f, None),
        ({"id": "age", "getter": lambda: 1}, [1], None),
        ({"id": "age", "getter": lambda: 1}, None, "not callable"),
    ],
)
def test_register_contract_violations(registry, field, chain, callback) -> None:
    with pytest.raises(TypeError):
        register(registry, field, chain, callback)
    assert registry.fields == {}


def test_contract_error_is_type_error() -> None:
    assert issubclass(ContractError, TypeError)


def test_deregister_removes_field_result_and_membership(registry, caplog) -> None:
    register(registry, {"id": "age", "getter": lambda: 17, "groups": ["adult-checks"]}, [lambda f: f.value >= 18])
    validate_one(registry, "age")
    assert deregister(registry, "age") is True

    assert get_one_result(registry, "age") is None
    assert "age" not in registry.members("adult-checks")
    with caplog.at_level(logging.WARNING):
        assert validate_one(registry, "age") is None
    assert "id(age) has not been registered" in caplog.text


def test_deregister_unknown_is_noop(registry, caplog) -> None:
    calls = []
    with caplog.at_level(logging.WARNING):
        assert deregister(registry, "ghost", lambda: calls.append(1)) is None
    assert calls == []
    assert "ghost" in caplog.text


def test_reregister_after_deregister_starts_without_groups(registry) -> None:
    register(registry, {"id": "age", "getter": lambda: 1, "groups": ["a"]})
    deregister(registry, "age")
    register(registry, {"id": "age", "getter": lambda: 1})
    assert registry.groups_of("age") == []
