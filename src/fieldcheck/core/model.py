from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol


@dataclass(slots=True, frozen=True)
class FieldInput:
    """What a validation check receives: the display name and a fresh value."""

    name: str
    value: Any


class ValueGetter(Protocol):
    def __call__(self) -> Any: ...


class ValidationCheck(Protocol):
    def __call__(self, field: FieldInput) -> Any: ...


class Listener(Protocol):
    def __call__(self, results: list[Any]) -> Any: ...


Callback = Callable[[], Any]


@dataclass(slots=True)
class FieldSpec:
    id: str
    getter: ValueGetter
    name: str | None = None
    groups: list[str] | None = None


@dataclass(slots=True, eq=False)
class ListenerEntry:
    listener: Listener


@dataclass(slots=True)
class FieldRecord:
    id: str
    getter: ValueGetter
    name: str | None = None
    validation_chain: list[ValidationCheck] = field(default_factory=list)
    listeners: list[ListenerEntry] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.id if self.name is None else self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "validation_chain": len(self.validation_chain),
            "listeners": len(self.listeners),
        }


class CheckStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    WARN = "WARN"
    SKIP = "SKIP"


class Severity(str, Enum):
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"


@dataclass(slots=True)
class CheckResult:
    field: str
    rule: str
    status: CheckStatus
    severity: Severity
    message: str
    evidence: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "rule": self.rule,
            "status": self.status.value,
            "severity": self.severity.value,
            "message": self.message,
            "evidence": self.evidence,
        }
