from __future__ import annotations

from pathlib import Path

from fieldcheck.core.results import RunSummary


def render_markdown_report(summary: RunSummary) -> str:
    lines = ["# fieldcheck report", ""]
    if summary.groups:
        lines.append(f"Groups: {', '.join(summary.groups)}")
        lines.append("")

    lines.append("## Summary")
    lines.append(f"- Exit code: {summary.exit_code}")
    lines.append(f"- Status counts: {summary.counts_by_status()}")
    blocking = summary.blocking_fields()
    if blocking:
        lines.append(f"- Blocking fields: {', '.join(blocking)}")
    lines.append("")
    lines.append("## Fields")

    for field_id, outcome in summary.outcomes.items():
        lines.append(f"### {field_id} ({outcome.status.value})")
        if not outcome.results:
            lines.append("- no checks")
        for r in outcome.results:
            lines.append(f"- **{r.status.value}** `{r.rule}`: {r.message}")
        lines.append("")
    return "\n".join(lines)


def write_markdown_report(summary: RunSummary, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_markdown_report(summary), encoding="utf-8")
