from __future__ import annotations

import re
from typing import Any, Callable

from fieldcheck.core.errors import RuleFileError
from fieldcheck.core.model import CheckResult, CheckStatus, FieldInput, Severity

from .schema import RuleSpec

RULE_KINDS = {"required", "min", "max", "min_length", "max_length", "pattern", "one_of", "type"}

_TYPES: dict[str, tuple[type, ...]] = {
    "str": (str,),
    "int": (int,),
    "float": (float,),
    "number": (int, float),
    "bool": (bool,),
    "list": (list,),
    "dict": (dict,),
}


def _severity(value: str) -> Severity:
    if value.upper() == "WARN":
        return Severity.WARN
    if value.upper() == "INFO":
        return Severity.INFO
    return Severity.ERROR


def _mk(field: str, rule: str, ok: bool, severity: Severity, message: str, evidence: dict | None = None) -> CheckResult:
    return CheckResult(
        field=field,
        rule=rule,
        status=CheckStatus.PASS if ok else CheckStatus.FAIL,
        severity=Severity.INFO if ok else severity,
        message=message,
        evidence=evidence or {},
    )


def _skip(field: str, rule: str) -> CheckResult:
    return CheckResult(field, rule, CheckStatus.SKIP, Severity.INFO, "no value", {"value": None})


def _param(rule: RuleSpec, key: str) -> Any:
    if key not in rule.params:
        raise RuleFileError(f"rule {rule.kind} needs a '{key}' parameter")
    return rule.params[key]


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict, tuple, set)) and len(value) == 0)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_check(rule: RuleSpec) -> Callable[[FieldInput], CheckResult]:
    """Turn a rule into a validation-chain entry that returns a CheckResult."""
    sev = _severity(rule.severity)
    kind = rule.kind

    if kind == "required":
        def check(field: FieldInput) -> CheckResult:
            ok = not _is_empty(field.value)
            return _mk(field.name, kind, ok, sev, rule.message or f"{field.name} is required", {"value": field.value})
        return check

    if kind in {"min", "max"}:
        bound = _param(rule, "value")
        if not _is_number(bound):
            raise RuleFileError(f"rule {kind} needs a numeric 'value'")

        def check(field: FieldInput) -> CheckResult:
            if field.value is None:
                return _skip(field.name, kind)
            if not _is_number(field.value):
                return _mk(field.name, kind, False, sev, f"{field.name} must be a number", {"value": field.value})
            ok = field.value >= bound if kind == "min" else field.value <= bound
            relation = "at least" if kind == "min" else "at most"
            message = rule.message or f"{field.name} must be {relation} {bound}"
            return _mk(field.name, kind, ok, sev, message, {"value": field.value, "bound": bound})
        return check

    if kind in {"min_length", "max_length"}:
        bound = _param(rule, "value")
        if not isinstance(bound, int) or isinstance(bound, bool) or bound < 0:
            raise RuleFileError(f"rule {kind} needs a non-negative integer 'value'")

        def check(field: FieldInput) -> CheckResult:
            if field.value is None:
                return _skip(field.name, kind)
            try:
                length = len(field.value)
            except TypeError:
                return _mk(field.name, kind, False, sev, f"{field.name} has no length", {"value": field.value})
            ok = length >= bound if kind == "min_length" else length <= bound
            relation = "at least" if kind == "min_length" else "at most"
            message = rule.message or f"{field.name} must have {relation} {bound} items"
            return _mk(field.name, kind, ok, sev, message, {"length": length, "bound": bound})
        return check

    if kind == "pattern":
        raw = str(_param(rule, "pattern"))
        try:
            compiled = re.compile(raw)
        except re.error as exc:
            raise RuleFileError(f"invalid pattern {raw!r}: {exc}") from exc

        def check(field: FieldInput) -> CheckResult:
            if field.value is None:
                return _skip(field.name, kind)
            ok = isinstance(field.value, str) and compiled.fullmatch(field.value) is not None
            message = rule.message or f"{field.name} must match {raw}"
            return _mk(field.name, kind, ok, sev, message, {"value": field.value, "pattern": raw})
        return check

    if kind == "one_of":
        choices = _param(rule, "values")
        if not isinstance(choices, list):
            raise RuleFileError("rule one_of needs a list 'values'")

        def check(field: FieldInput) -> CheckResult:
            if field.value is None:
                return _skip(field.name, kind)
            ok = field.value in choices
            message = rule.message or f"{field.name} must be one of {choices}"
            return _mk(field.name, kind, ok, sev, message, {"value": field.value, "choices": choices})
        return check

    if kind == "type":
        type_name = str(_param(rule, "type"))
        if type_name not in _TYPES:
            raise RuleFileError(f"rule type needs 'type' in {sorted(_TYPES)}")
        expected = _TYPES[type_name]

        def check(field: FieldInput) -> CheckResult:
            if field.value is None:
                return _skip(field.name, kind)
            ok = isinstance(field.value, expected)
            if ok and type_name in {"int", "float", "number"}:
                ok = not isinstance(field.value, bool)
            message = rule.message or f"{field.name} must be of type {type_name}"
            return _mk(field.name, kind, ok, sev, message, {"type": type(field.value).__name__})
        return check

    raise RuleFileError(f"Unsupported rule kind: {kind}")
