from __future__ import annotations

import copy
import logging
from typing import Any, Sequence

from fieldcheck.core.model import Callback, FieldInput, FieldRecord, ValidationCheck
from fieldcheck.core.registry import ValidatorRegistry

from .groups import join_groups, leave_all_groups, resolve_ids
from .guards import (
    check_callback,
    check_field,
    check_getter,
    check_groups,
    check_id,
    check_name,
    check_validation_chain,
    field_attr,
    warn_when_not_registered,
    warn_when_registered,
)
from .listeners import notify

logger = logging.getLogger(__name__)


def register(
    registry: ValidatorRegistry,
    field: Any,
    validation_chain: list[ValidationCheck] | None = None,
    callback: Callback | None = None,
) -> bool | None:
    """Register a field.

    ``field`` is a mapping or an object exposing ``id`` and ``getter`` and,
    optionally, ``name`` and ``groups``. Registering an id twice logs a
    warning and leaves the first registration untouched.
    """
    check_field(field)
    field_id = field_attr(field, "id")
    getter = field_attr(field, "getter")
    name = field_attr(field, "name")
    groups = field_attr(field, "groups")
    check_id(field_id)
    check_getter(getter)
    check_name(name)
    check_groups(groups)
    check_validation_chain(validation_chain)
    check_callback(callback)

    if warn_when_registered(registry, field_id):
        return None

    registry.fields[field_id] = FieldRecord(
        id=field_id,
        getter=getter,
        name=name,
        validation_chain=list(validation_chain or []),
    )
    join_groups(registry, field_id, groups or [])
    logger.debug("registered id(%s) with %d checks", field_id, len(validation_chain or []))

    if callback is not None:
        callback()
    return True


def validate_one(registry: ValidatorRegistry, field_id: str, callback: Callback | None = None) -> list[Any] | None:
    """Run the validation chain of one field and cache the results.

    The getter is sampled again for every check. Listeners get the full result
    list after it has been cached.
    """
    check_id(field_id)
    check_callback(callback)

    if not warn_when_not_registered(registry, field_id):
        return None

    record = registry.fields[field_id]
    results = [check(FieldInput(name=record.display_name, value=record.getter())) for check in record.validation_chain]

    registry.results[field_id] = copy.deepcopy(results)
    notify(record, registry.results[field_id])

    if callback is not None:
        callback()
    return results


def validate(
    registry: ValidatorRegistry,
    groups: Sequence[str] | set[str] | None = None,
    callback: Callback | None = None,
) -> dict[str, list[Any] | None]:
    """Validate every field in ``groups``, or every field when ``groups`` is None."""
    check_groups(groups)
    check_callback(callback)

    out = {field_id: validate_one(registry, field_id) for field_id in resolve_ids(registry, groups)}

    if callback is not None:
        callback()
    return out


def deregister(registry: ValidatorRegistry, field_id: str, callback: Callback | None = None) -> bool | None:
    check_id(field_id)
    check_callback(callback)

    if not warn_when_not_registered(registry, field_id):
        return None

    del registry.fields[field_id]
    registry.results.pop(field_id, None)
    leave_all_groups(registry, field_id)
    logger.debug("deregistered id(%s)", field_id)

    if callback is not None:
        callback()
    return True


def get_one_result(registry: ValidatorRegistry, field_id: str) -> list[Any] | None:
    check_id(field_id)
    warn_when_not_registered(registry, field_id)
    return copy.deepcopy(registry.results.get(field_id))


def get_results(registry: ValidatorRegistry, groups: Sequence[str] | set[str] | None = None) -> dict[str, list[Any] | None]:
    check_groups(groups)
    return {field_id: get_one_result(registry, field_id) for field_id in resolve_ids(registry, groups)}


def clear_one_result(registry: ValidatorRegistry, field_id: str) -> None:
    check_id(field_id)
    warn_when_not_registered(registry, field_id)
    registry.results.pop(field_id, None)


def clear_results(registry: ValidatorRegistry, groups: Sequence[str] | set[str] | None = None) -> None:
    check_groups(groups)
    for field_id in resolve_ids(registry, groups):
        clear_one_result(registry, field_id)
