from __future__ import annotations

from pathlib import Path
from typing import Any

from fieldcheck.core.errors import RuleFileError
from fieldcheck.utils.yaml import load_yaml

from .builtin import RULE_KINDS
from .schema import FieldDefinition, RuleSet, RuleSpec

_RULE_KEYS = {"kind", "severity", "message"}


def _required(data: dict, key: str, where: str):
    if key not in data:
        raise RuleFileError(f"Missing required key: {key} ({where})")
    return data[key]


def _str_list(value: Any, key: str, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise RuleFileError(f"{key} must be a list of strings ({where})")
    return list(value)


def _load_rule(data: Any, where: str) -> RuleSpec:
    if not isinstance(data, dict):
        raise RuleFileError(f"rule must be a mapping ({where})")
    kind = str(_required(data, "kind", where))
    if kind not in RULE_KINDS:
        raise RuleFileError(f"Unsupported rule kind: {kind} ({where})")
    severity = str(data.get("severity", "ERROR")).upper()
    if severity not in {"ERROR", "WARN", "INFO"}:
        raise RuleFileError(f"severity must be ERROR|WARN|INFO ({where})")
    message = data.get("message")
    return RuleSpec(
        kind=kind,
        params={k: v for k, v in data.items() if k not in _RULE_KEYS},
        severity=severity,
        message=None if message is None else str(message),
    )


def parse_rules(data: dict[str, Any]) -> RuleSet:
    entries = _required(data, "fields", "top level")
    if not isinstance(entries, list):
        raise RuleFileError("fields must be a list")

    out: list[FieldDefinition] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        where = f"fields[{index}]"
        if not isinstance(entry, dict):
            raise RuleFileError(f"field entry must be a mapping ({where})")
        field_id = _required(entry, "id", where)
        if not isinstance(field_id, str) or not field_id:
            raise RuleFileError(f"id must be a non-empty string ({where})")
        if field_id in seen:
            raise RuleFileError(f"Duplicate field id: {field_id}")
        seen.add(field_id)

        name = entry.get("name")
        rules = entry.get("rules", [])
        if not isinstance(rules, list):
            raise RuleFileError(f"rules must be a list ({where})")
        out.append(
            FieldDefinition(
                id=field_id,
                name=None if name is None else str(name),
                groups=_str_list(entry.get("groups", []), "groups", where),
                rules=[_load_rule(r, f"{where}.rules[{i}]") for i, r in enumerate(rules)],
            )
        )
    return RuleSet(fields=out)


def load_rules(path: Path) -> RuleSet:
    return parse_rules(load_yaml(path))


def load_values(path: Path) -> dict[str, Any]:
    return load_yaml(path)
