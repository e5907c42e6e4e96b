from __future__ import annotations

from functools import partial
from typing import Any, Mapping

from fieldcheck.core.model import FieldSpec
from fieldcheck.core.registry import ValidatorRegistry
from fieldcheck.validators.engine import register

from .builtin import build_check
from .schema import RuleSet


def register_rules(registry: ValidatorRegistry, ruleset: RuleSet, values: Mapping[str, Any]) -> list[str]:
    """Register every field of ``ruleset`` with a getter reading from ``values``.

    Returns the ids that were newly registered; ids already present are skipped
    by register() with a warning.
    """
    added: list[str] = []
    for definition in ruleset.fields:
        spec = FieldSpec(
            id=definition.id,
            getter=partial(values.get, definition.id),
            name=definition.name,
            groups=list(definition.groups),
        )
        chain = [build_check(rule) for rule in definition.rules]
        if register(registry, spec, chain):
            added.append(definition.id)
    return added
