from __future__ import annotations

from typing import Iterable, Sequence

from fieldcheck.core.model import Callback
from fieldcheck.core.registry import ValidatorRegistry

from .guards import (
    check_callback,
    check_group,
    check_groups,
    check_id,
    warn_when_not_in_group,
    warn_when_not_registered,
)


def resolve_ids(registry: ValidatorRegistry, groups: Sequence[str] | set[str] | None = None) -> list[str]:
    """Ids targeted by ``groups``, or every registered id when ``groups`` is None.

    Unknown group names contribute nothing. Ids come back in registration order.
    """
    if groups is None:
        return list(registry.fields)
    selected: set[str] = set()
    for group in groups:
        selected |= registry.members(group)
    return [field_id for field_id in registry.fields if field_id in selected]


def join_groups(registry: ValidatorRegistry, field_id: str, groups: Iterable[str]) -> None:
    for group in groups:
        registry.groups[group].add(field_id)


def leave_all_groups(registry: ValidatorRegistry, field_id: str) -> None:
    for members in registry.groups.values():
        members.discard(field_id)


def update_groups(
    registry: ValidatorRegistry,
    field_id: str,
    groups: list[str] | None,
    callback: Callback | None = None,
) -> bool | None:
    """Replace the group memberships of ``field_id`` with ``groups``."""
    check_id(field_id)
    check_groups(groups)
    check_callback(callback)

    if not warn_when_not_registered(registry, field_id):
        return None

    leave_all_groups(registry, field_id)
    join_groups(registry, field_id, groups or [])

    if callback is not None:
        callback()
    return True


def add_group(
    registry: ValidatorRegistry,
    field_id: str,
    group: str,
    callback: Callback | None = None,
) -> bool | None:
    check_id(field_id)
    check_group(group)
    check_callback(callback)

    if not warn_when_not_registered(registry, field_id):
        return None

    join_groups(registry, field_id, [group])

    if callback is not None:
        callback()
    return True


def remove_group(
    registry: ValidatorRegistry,
    field_id: str,
    group: str,
    callback: Callback | None = None,
) -> bool | None:
    check_id(field_id)
    check_group(group)
    check_callback(callback)

    if not warn_when_not_registered(registry, field_id):
        return None
    warn_when_not_in_group(registry, field_id, group)
    if group not in registry.groups:
        return None

    registry.groups[group].discard(field_id)

    if callback is not None:
        callback()
    return True
