from __future__ import annotations

from pathlib import Path

import typer

from fieldcheck.core.errors import RuleFileError
from fieldcheck.core.logging import configure_logging
from fieldcheck.core.registry import ValidatorRegistry
from fieldcheck.core.results import RunSummary
from fieldcheck.render.report_json import render_json_report, write_json_report
from fieldcheck.render.report_md import write_markdown_report
from fieldcheck.rules.loader import load_rules, load_values
from fieldcheck.rules.registration import register_rules
from fieldcheck.validators.engine import validate as run_validation
from fieldcheck.validators.info import format_group_info, format_validation_info

app = typer.Typer(add_completion=False)


def _registry(rules: Path, values: Path | None) -> ValidatorRegistry:
    try:
        ruleset = load_rules(rules)
        data = load_values(values) if values is not None else {}
        registry = ValidatorRegistry()
        register_rules(registry, ruleset, data)
    except RuleFileError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return registry


def _print_console(summary: RunSummary) -> None:
    for field_id, outcome in summary.outcomes.items():
        for result in outcome.results:
            typer.echo(f"[{field_id}] {result.status.value:4} {result.rule} - {result.message}")
    typer.echo(f"Exit code: {summary.exit_code}")


@app.command()
def validate(
    rules: Path = typer.Option(..., "--rules", exists=True, dir_okay=False),
    values: Path = typer.Option(..., "--values", exists=True, dir_okay=False),
    group: list[str] | None = typer.Option(None, "--group"),
    json_out: Path | None = typer.Option(None, "--json-out"),
    md_out: Path | None = typer.Option(None, "--md-out"),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON report instead of one line per check."),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    configure_logging(verbose)
    registry = _registry(rules, values)

    summary = RunSummary.from_validation(run_validation(registry, group or None), group)
    if as_json:
        typer.echo(render_json_report(summary))
    else:
        _print_console(summary)

    if json_out is not None:
        write_json_report(summary, json_out)
    if md_out is not None:
        write_markdown_report(summary, md_out)
    raise typer.Exit(code=summary.exit_code)


@app.command()
def info(
    rules: Path = typer.Option(..., "--rules", exists=True, dir_okay=False),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    configure_logging(verbose)
    registry = _registry(rules, None)
    typer.echo(f"fields: {format_validation_info(registry)}")
    typer.echo(f"groups: {format_group_info(registry)}")


if __name__ == "__main__":
    app()
