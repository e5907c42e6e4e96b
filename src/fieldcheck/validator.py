from __future__ import annotations

from typing import Any, Sequence

from fieldcheck.core.model import Callback, Listener, ValidationCheck
from fieldcheck.core.registry import ValidatorRegistry
from fieldcheck.validators import engine, groups, info, listeners


class Validator:
    """A ValidatorRegistry bundled with the operations that act on it."""

    def __init__(self, registry: ValidatorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else ValidatorRegistry()

    def register(self, field: Any, validation_chain: list[ValidationCheck] | None = None, callback: Callback | None = None):
        return engine.register(self.registry, field, validation_chain, callback)

    def deregister(self, field_id: str, callback: Callback | None = None):
        return engine.deregister(self.registry, field_id, callback)

    def validate(self, groups: Sequence[str] | set[str] | None = None, callback: Callback | None = None):
        return engine.validate(self.registry, groups, callback)

    def validate_one(self, field_id: str, callback: Callback | None = None):
        return engine.validate_one(self.registry, field_id, callback)

    def subscribe(self, field_id: str, listener: Listener | None = None, callback: Callback | None = None):
        return listeners.subscribe(self.registry, field_id, listener, callback)

    def clear_listeners(self, field_id: str, callback: Callback | None = None):
        return listeners.clear_listeners(self.registry, field_id, callback)

    def update_groups(self, field_id: str, group_names: list[str] | None, callback: Callback | None = None):
        return groups.update_groups(self.registry, field_id, group_names, callback)

    def add_group(self, field_id: str, group: str, callback: Callback | None = None):
        return groups.add_group(self.registry, field_id, group, callback)

    def remove_group(self, field_id: str, group: str, callback: Callback | None = None):
        return groups.remove_group(self.registry, field_id, group, callback)

    def get_one_result(self, field_id: str):
        return engine.get_one_result(self.registry, field_id)

    def get_results(self, group_names: Sequence[str] | set[str] | None = None):
        return engine.get_results(self.registry, group_names)

    def clear_one_result(self, field_id: str) -> None:
        engine.clear_one_result(self.registry, field_id)

    def clear_results(self, group_names: Sequence[str] | set[str] | None = None) -> None:
        engine.clear_results(self.registry, group_names)

    def print_validation_info(self) -> None:
        info.print_validation_info(self.registry)

    def print_group_info(self) -> None:
        info.print_group_info(self.registry)

    def print_all_info(self) -> None:
        info.print_all_info(self.registry)
