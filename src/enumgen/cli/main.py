"""
enumgen command line.

Inspects the decisions the planner makes for a set of enum declarations.
The scanner that finds declarations in source, and the renderer that
writes generated files, run elsewhere; this CLI reads scanner output as
JSON.

Commands:
- plan: Resolve and plan every enum in a JSON file
- directives: List recognised annotation directives
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from enumgen._version import get_version
from enumgen.core.config_loader import find_config_file, load_global_config
from enumgen.core.errors import ConfigurationError, EnumGenError
from enumgen.core.ir import BOOL_DIRECTIVES, STRING_DIRECTIVES, EnumSpec, GenerationPlan
from enumgen.core.pipeline import PipelineSettings, plan_enums

app = typer.Typer(
    help="Plan companion code for annotated enum types",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"enumgen {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Plan companion code for annotated enum types."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_specs(specs_file: Path) -> list[EnumSpec]:
    """Load scanner output: a JSON list of enum declarations."""
    try:
        data = json.loads(specs_file.read_text())
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Cannot read {escape(str(specs_file))}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if isinstance(data, dict):
        data = data.get("enums", [])
    if not isinstance(data, list):
        console.print(f"[red]{escape(str(specs_file))}: expected a list of enum declarations[/red]")
        raise typer.Exit(code=1)

    try:
        return [EnumSpec.model_validate(item) for item in data]
    except ValidationError as e:
        console.print(f"[red]Invalid enum declaration in {escape(str(specs_file))}:[/red]")
        console.print(escape(str(e)))
        raise typer.Exit(code=1)


def _plan_to_dict(generation_plan: GenerationPlan) -> dict[str, Any]:
    return {
        "type_name": generation_plan.type_name,
        "underlying": generation_plan.underlying.value,
        "value_names": generation_plan.value_names,
        "artifacts": sorted(a.value for a in generation_plan.artifacts),
        "options": generation_plan.resolved.explicit_options(),
        "parse": generation_plan.parse.model_dump(mode="json") if generation_plan.parse else None,
        "sql": (
            {
                "value_kind": generation_plan.sql.value_kind.value,
                "scan_accepts": sorted(k.value for k in generation_plan.sql.scan_accepts),
            }
            if generation_plan.sql
            else None
        ),
        "null_wrappers": [w.model_dump(mode="json") for w in generation_plan.null_wrappers],
        "doc_comments": generation_plan.doc_comments,
        "ordinal_comments": generation_plan.ordinal_comments,
    }


def _print_plan(generation_plan: GenerationPlan) -> None:
    table = Table(title=f"{generation_plan.type_name} ({generation_plan.underlying.value})")
    table.add_column("Ordinal", style="dim", justify="right")
    table.add_column("Literal")
    table.add_column("Identifier", style="cyan")

    for value in generation_plan.values:
        table.add_row(str(value.ordinal), escape(value.literal), value.identifier)

    console.print(table)
    artifacts = ", ".join(sorted(a.value for a in generation_plan.artifacts))
    console.print(f"[dim]artifacts:[/dim] {artifacts}")
    if generation_plan.sql:
        console.print(f"[dim]sql value:[/dim] {generation_plan.sql.value_kind.value}")
    for wrapper in generation_plan.null_wrappers:
        console.print(f"[dim]nullable:[/dim] {wrapper.type_name} ({wrapper.backing.value})")
    console.print()


@app.command(name="plan")
def plan_command(
    specs_file: Annotated[Path, typer.Argument(help="JSON file of enum declarations")],
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Defaults file (enumgen.toml or pyproject.toml)"),
    ] = None,
    project_dir: Annotated[
        Path,
        typer.Option("--project", "-p", help="Directory searched for a defaults file"),
    ] = Path("."),
    fail_fast: Annotated[
        bool, typer.Option("--fail-fast", help="Stop at the first failing type")
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """
    Resolve annotations and print the generation plan for each enum.

    Examples:
        enumgen plan enums.json
        enumgen plan enums.json --config enumgen.toml --json
    """
    specs = _load_specs(specs_file)

    if config is not None and not config.exists():
        console.print(f"[red]Defaults file not found: {escape(str(config))}[/red]")
        raise typer.Exit(code=1)

    config_path = config or find_config_file(project_dir.resolve())
    try:
        global_config = load_global_config(config_path) if config_path else None
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    try:
        report = plan_enums(specs, global_config, PipelineSettings(fail_fast=fail_fast))
    except EnumGenError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if output_json:
        payload = {
            "plans": [_plan_to_dict(p) for p in report.plans.values()],
            "failures": {name: str(err) for name, err in report.failures.items()},
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        for generation_plan in report.plans.values():
            _print_plan(generation_plan)
        for type_name, error in report.failures.items():
            console.print(f"[red]✗ {type_name}:[/red] {escape(str(error))}")

    if not report.success:
        raise typer.Exit(code=1)


@app.command(name="directives")
def directives_command() -> None:
    """List recognised annotation directives."""
    table = Table(title="Directives")
    table.add_column("Directive", style="cyan")
    table.add_column("Kind")
    table.add_column("Option")

    for key, slot in BOOL_DIRECTIVES.items():
        table.add_row(f"@{key}", "bool", slot)
    for key, slot in STRING_DIRECTIVES.items():
        table.add_row(f'@{key}:"..."', "string", slot)

    console.print(table)


def main() -> None:
    """Entry point for the ``enumgen`` console script."""
    app()
