from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .model import CheckResult, CheckStatus, Severity

# Worst first; a field reports the worst status among its checks.
_STATUS_RANK = [CheckStatus.FAIL, CheckStatus.WARN, CheckStatus.PASS, CheckStatus.SKIP]


@dataclass(slots=True)
class FieldOutcome:
    field_id: str
    results: list[CheckResult] = field(default_factory=list)

    @property
    def status(self) -> CheckStatus:
        present = {r.status for r in self.results}
        for status in _STATUS_RANK:
            if status in present:
                return status
        return CheckStatus.SKIP

    @property
    def blocking(self) -> bool:
        return any(r.status == CheckStatus.FAIL and r.severity == Severity.ERROR for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status.value, "results": [r.to_dict() for r in self.results]}


@dataclass(slots=True)
class RunSummary:
    """CheckResults of one validation run, keyed by field id."""

    outcomes: dict[str, FieldOutcome] = field(default_factory=dict)
    groups: list[str] | None = None

    @classmethod
    def from_validation(
        cls,
        outcome: Mapping[str, list[Any] | None],
        groups: list[str] | None = None,
    ) -> RunSummary:
        """Build a summary from a validate()/get_results() mapping.

        Entries that are not CheckResults (custom checks returning bools or
        messages) are left out; fields that were never validated get an empty
        outcome.
        """
        summary = cls(groups=list(groups) if groups else None)
        for field_id, results in outcome.items():
            checks = [r for r in results or [] if isinstance(r, CheckResult)]
            summary.outcomes[field_id] = FieldOutcome(field_id, checks)
        return summary

    @property
    def results(self) -> list[CheckResult]:
        return [r for o in self.outcomes.values() for r in o.results]

    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if r.status == CheckStatus.FAIL]

    def blocking_fields(self) -> list[str]:
        return [field_id for field_id, o in self.outcomes.items() if o.blocking]

    def counts_by_status(self) -> dict[str, int]:
        counts = dict.fromkeys((s.value for s in CheckStatus), 0)
        for r in self.results:
            counts[r.status.value] += 1
        return counts

    @property
    def exit_code(self) -> int:
        return 1 if self.blocking_fields() else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "groups": self.groups,
            "summary": {
                "fields": len(self.outcomes),
                "counts_by_status": self.counts_by_status(),
                "blocking_fields": self.blocking_fields(),
                "exit_code": self.exit_code,
            },
            "fields": {field_id: o.to_dict() for field_id, o in self.outcomes.items()},
        }
