from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fieldcheck.core.errors import ContractError
from fieldcheck.core.registry import ValidatorRegistry

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)
_SCALAR_TYPES = (str, bytes, int, float, bool)


def field_attr(field: Any, key: str) -> Any:
    if isinstance(field, Mapping):
        return field.get(key)
    return getattr(field, key, None)


def check_field(field: Any) -> None:
    if field is None or isinstance(field, _SCALAR_TYPES):
        raise ContractError("field must be a mapping or an object exposing id and getter.")


def check_id(field_id: Any) -> None:
    if not isinstance(field_id, str) or not field_id:
        raise ContractError("id must be a non-empty string.")


def check_getter(getter: Any) -> None:
    if not callable(getter):
        raise ContractError("getter must be a callable taking no arguments.")


def check_name(name: Any) -> None:
    if name is not None and not isinstance(name, str):
        raise ContractError("name must be a string.")


def check_group(group: Any) -> None:
    if not isinstance(group, str):
        raise ContractError("group must be a string.")


def check_groups(groups: Any) -> None:
    if groups is None:
        return
    if not isinstance(groups, _SEQUENCE_TYPES) or not all(isinstance(g, str) for g in groups):
        raise ContractError("groups must be a sequence of strings.")


def check_validation_chain(chain: Any) -> None:
    if chain is None:
        return
    if not isinstance(chain, (list, tuple)) or not all(callable(f) for f in chain):
        raise ContractError("validation chain must be a sequence of callables.")


def check_callback(callback: Any) -> None:
    if callback is not None and not callable(callback):
        raise ContractError("callback must be callable.")


def check_listener(listener: Any) -> None:
    if listener is not None and not callable(listener):
        raise ContractError("listener must be a callable taking the result list.")


def warn_when_not_registered(registry: ValidatorRegistry, field_id: str) -> bool:
    if registry.is_registered(field_id):
        return True
    logger.warning("id(%s) has not been registered.", field_id)
    return False


def warn_when_registered(registry: ValidatorRegistry, field_id: str) -> bool:
    if not registry.is_registered(field_id):
        return False
    logger.warning("id(%s) has already been registered; deregister it before registering again.", field_id)
    return True


def warn_when_not_in_group(registry: ValidatorRegistry, field_id: str, group: str) -> bool:
    if field_id in registry.members(group):
        return True
    logger.warning("id(%s) is not in group(%s).", field_id, group)
    return False
