from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from fieldcheck.core.errors import RuleFileError


def load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise RuleFileError(f"YAML at {path} could not be parsed: {exc}") from exc
    if not isinstance(data, dict):
        raise RuleFileError(f"YAML at {path} must be a mapping")
    return data
