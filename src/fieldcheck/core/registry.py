from __future__ import annotations

from collections import defaultdict
from typing import Any

from .model import FieldRecord


class ValidatorRegistry:
    """State shared by the validation operations.

    Holds the registered fields, the group memberships and the latest result of
    every validated field. Operations in ``fieldcheck.validators`` take an
    instance as their first argument; nothing here is process-global.
    """

    def __init__(self) -> None:
        self.fields: dict[str, FieldRecord] = {}
        self.groups: dict[str, set[str]] = defaultdict(set)
        self.results: dict[str, list[Any]] = {}

    def is_registered(self, field_id: str) -> bool:
        return field_id in self.fields

    def members(self, group: str) -> set[str]:
        return self.groups.get(group, set())

    def groups_of(self, field_id: str) -> list[str]:
        return sorted(name for name, ids in self.groups.items() if field_id in ids)
