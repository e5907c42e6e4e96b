from __future__ import annotations

import json
from pathlib import Path

from fieldcheck.core.results import RunSummary


def render_json_report(summary: RunSummary) -> str:
    # evidence holds raw field values, which may not be JSON types
    return json.dumps(summary.to_dict(), indent=2, sort_keys=True, default=repr)


def write_json_report(summary: RunSummary, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_json_report(summary) + "\n", encoding="utf-8")
