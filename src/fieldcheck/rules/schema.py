from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class RuleSpec:
    kind: str
    params: dict[str, Any] = field(default_factory=dict)
    severity: str = "ERROR"
    message: str | None = None


@dataclass(slots=True)
class FieldDefinition:
    id: str
    name: str | None = None
    groups: list[str] = field(default_factory=list)
    rules: list[RuleSpec] = field(default_factory=list)


@dataclass(slots=True)
class RuleSet:
    fields: list[FieldDefinition] = field(default_factory=list)

    def ids(self) -> list[str]:
        return [f.id for f in self.fields]

    def groups(self) -> list[str]:
        return sorted({g for f in self.fields for g in f.groups})
