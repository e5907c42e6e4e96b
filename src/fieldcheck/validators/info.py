from __future__ import annotations

import json
import logging

from fieldcheck.core.registry import ValidatorRegistry

logger = logging.getLogger(__name__)

_RULE = "=" * 46


def _banner(title: str) -> str:
    return f" {title} ".center(len(_RULE), "=")


def format_validation_info(registry: ValidatorRegistry) -> str:
    return json.dumps([record.to_dict() for record in registry.fields.values()])


def format_group_info(registry: ValidatorRegistry) -> str:
    payload = {name: sorted(members) for name, members in registry.groups.items()}
    return json.dumps(payload, sort_keys=True)


def print_validation_info(registry: ValidatorRegistry) -> None:
    logger.info("%s\n%s\n%s", _banner("VALIDATION INFO"), format_validation_info(registry), _RULE)


def print_group_info(registry: ValidatorRegistry) -> None:
    logger.info("%s\n%s\n%s", _banner("GROUP INFO"), format_group_info(registry), _RULE)


def print_all_info(registry: ValidatorRegistry) -> None:
    logger.info(
        "%s\n%s\n%s\n%s\n%s\n%s",
        _banner("VALIDATION INFO"),
        format_validation_info(registry),
        _RULE,
        _banner("GROUP INFO"),
        format_group_info(registry),
        _RULE,
    )
