from __future__ import annotations

import copy
from typing import Any

from fieldcheck.core.model import Callback, FieldRecord, Listener, ListenerEntry
from fieldcheck.core.registry import ValidatorRegistry

from .guards import check_callback, check_id, check_listener, warn_when_not_registered


class Subscription:
    """Handle returned by subscribe(); removes its own listener entry once."""

    def __init__(self, record: FieldRecord, entry: ListenerEntry) -> None:
        self._record = record
        self._entry = entry
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> bool:
        if not self._active:
            return False
        self._active = False
        listeners = self._record.listeners
        for i, entry in enumerate(listeners):
            if entry is self._entry:
                del listeners[i]
                return True
        # clear_listeners() already dropped the entry
        return True

    __call__ = unsubscribe


def subscribe(
    registry: ValidatorRegistry,
    field_id: str,
    listener: Listener | None = None,
    callback: Callback | None = None,
) -> Subscription | bool | None:
    check_id(field_id)
    check_listener(listener)
    check_callback(callback)

    if listener is None:
        return True

    if not warn_when_not_registered(registry, field_id):
        return None

    record = registry.fields[field_id]
    entry = ListenerEntry(listener)
    record.listeners.append(entry)

    if callback is not None:
        callback()
    return Subscription(record, entry)


def clear_listeners(registry: ValidatorRegistry, field_id: str, callback: Callback | None = None) -> bool | None:
    check_id(field_id)
    check_callback(callback)

    if not warn_when_not_registered(registry, field_id):
        return None

    registry.fields[field_id].listeners.clear()

    if callback is not None:
        callback()
    return True


def notify(record: FieldRecord, results: list[Any]) -> None:
    """Call every listener with its own copy of ``results``."""
    for entry in list(record.listeners):
        entry.listener(copy.deepcopy(results))
