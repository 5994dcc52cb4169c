# astroconst/cli/constants.py
import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from astroconst.core.constants import (
    CONSTANTS,
    ConstantCategory,
    ConstantKind,
    get_constant,
    run_self_test,
)
from astroconst.core.exceptions import UnknownConstantError
from astroconst.core.export import EXPORTERS, constant_to_dict
from astroconst.core.logging import logger

constants_app = typer.Typer(help="View, export and check the constants table.")


class ShowFormat(str, Enum):
    plain = "plain"
    json = "json"
    md = "md"


@constants_app.command("list")
def list_constants(
    kind: Optional[ConstantKind] = typer.Option(None, "--kind", case_sensitive=False, help="Only Primary or Derived"),
    category: Optional[str] = typer.Option(
        None, "--category", help=f"Only this provenance group: {', '.join(c.name for c in ConstantCategory)}"
    ),
):
    """List constants with their values and units."""
    if category is not None:
        try:
            category = ConstantCategory[category.upper()]
        except KeyError:
            raise typer.BadParameter(f"Unknown category {category!r}", param_hint="--category") from None
    console = Console()
    table = Table(title="astroconst constants")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Units", style="dim")
    table.add_column("Kind", style="green")

    rows = [
        c for c in CONSTANTS
        if (kind is None or c.kind == kind) and (category is None or c.category == category)
    ]
    for const in rows:
        table.add_row(const.name, f"{const.value!r}", const.units, const.kind.value)

    console.print(table)
    logger.debug(f"Listed {len(rows)} of {len(CONSTANTS)} constants")


@constants_app.command("show")
def show_constant(
    name: str = typer.Argument(..., help="Constant name"),
    format: ShowFormat = typer.Option(ShowFormat.plain, "--format", "-f", help="Output format: plain|json|md"),
):
    """Show all metadata for a constant."""
    try:
        const = get_constant(name)
    except UnknownConstantError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    data = constant_to_dict(const)
    if format == ShowFormat.json:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    elif format == ShowFormat.md:
        lines = [
            f"## {const.name}",
            "",
            const.description,
            "",
            f"- **Value:** {const.value!r}",
            f"- **Units:** {const.units}",
            f"- **Kind:** {const.kind.value}",
            f"- **Category:** {const.category.value}",
        ]
        if const.relation:
            lines.append(f"- **Relation:** `{const.relation}`")
        if const.source:
            lines.append(f"- **Source:** {const.source}")
        lines.extend(f"- <{ref}>" for ref in const.source_refs)
        typer.echo("\n".join(lines))
    else:
        for key, value in data.items():
            if value in (None, [], ""):
                continue
            typer.echo(f"{key}: {value}")


@constants_app.command("export")
def export_constants(
    fmt: str = typer.Argument(..., metavar="FORMAT", help="One of: yaml, json, latex"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: constants.<ext>)"),
):
    """Write the whole table to a YAML, JSON or LaTeX file."""
    exporter = EXPORTERS.get(fmt.lower())
    if exporter is None:
        raise typer.BadParameter(
            f"Unsupported format {fmt!r}; choose from {', '.join(EXPORTERS)}",
            param_hint="FORMAT",
        )
    if output is None:
        ext = "tex" if fmt.lower() == "latex" else fmt.lower()
        output = Path(f"constants.{ext}")
    path = exporter(output)
    typer.echo(str(path))


@constants_app.command("check")
def check_constants():
    """Run the registry self-test (unique names, dependency order, relations)."""
    if not run_self_test():
        typer.echo("Self-test FAILED", err=True)
        raise typer.Exit(1)
    typer.echo("Self-test passed")
