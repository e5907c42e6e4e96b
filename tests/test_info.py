import json
import logging

from fieldcheck.validator import Validator
from fieldcheck.validators.engine import register
from fieldcheck.validators.info import format_group_info, format_validation_info, print_all_info, print_validation_info


def test_format_validation_info_reports_counts(registry) -> None:
    register(registry, {"id": "age", "name": "Age", "getter": lambda: 1}, [lambda f: 1, lambda f: 2])
    info = json.loads(format_validation_info(registry))
    assert info == [{"id": "age", "name": "Age", "validation_chain": 2, "listeners": 0}]


def test_format_group_info(registry) -> None:
    register(registry, {"id": "b", "getter": lambda: 1, "groups": ["g"]})
    register(registry, {"id": "a", "getter": lambda: 1, "groups": ["g", "h"]})
    assert json.loads(format_group_info(registry)) == {"g": ["a", "b"], "h": ["a"]}


def test_print_all_info_logs_snapshot(registry, caplog) -> None:
    register(registry, {"id": "age", "getter": lambda: 1, "groups": ["adult-checks"]})
    with caplog.at_level(logging.INFO, logger="fieldcheck"):
        print_all_info(registry)
    assert "VALIDATION INFO" in caplog.text
    assert "GROUP INFO" in caplog.text
    assert '"adult-checks": ["age"]' in caplog.text
    assert registry.is_registered("age")


def test_validator_facade_scenario(caplog) -> None:
    validator = Validator()
    calls = []
    validator.register({"id": "age", "getter": lambda: 17, "groups": ["adult-checks"]}, [lambda v: v.value >= 18])
    handle = validator.subscribe("age", calls.append)

    assert validator.validate(["adult-checks"]) == {"age": [False]}
    assert validator.get_results(["adult-checks"]) == {"age": [False]}
    handle()
    validator.validate_one("age")
    assert calls == [[False]]

    validator.clear_results(["adult-checks"])
    assert validator.get_one_result("age") is None
    with caplog.at_level(logging.INFO, logger="fieldcheck"):
        validator.print_group_info()
    assert "GROUP INFO" in caplog.text


def test_print_validation_info(registry, caplog) -> None:
    register(registry, {"id": "age", "getter": lambda: 1}, [lambda f: 1])
    with caplog.at_level(logging.INFO, logger="fieldcheck"):
        print_validation_info(registry)
    assert "VALIDATION INFO" in caplog.text
    assert '"validation_chain": 1' in caplog.text
    assert "GROUP INFO" not in caplog.text


def test_validator_facade_membership_and_cleanup(caplog) -> None:
    validator = Validator()
    calls = []
    validator.register({"id": "age", "getter": lambda: 17}, [lambda v: v.value >= 18])
    validator.register({"id": "name", "getter": lambda: "x"}, [lambda v: bool(v.value)])

    assert validator.add_group("age", "a") is True
    assert validator.update_groups("name", ["a", "b"]) is True
    assert validator.remove_group("age", "a") is True
    assert validator.validate(["a"]) == {"name": [True]}

    validator.subscribe("name", calls.append)
    assert validator.clear_listeners("name") is True
    validator.validate_one("name")
    assert calls == []

    validator.clear_one_result("name")
    assert validator.get_one_result("name") is None

    assert validator.deregister("name") is True
    assert not validator.registry.is_registered("name")
    assert validator.registry.groups_of("name") == []
    with caplog.at_level(logging.INFO, logger="fieldcheck"):
        validator.print_validation_info()
        validator.print_all_info()
    assert caplog.text.count("VALIDATION INFO") == 2
