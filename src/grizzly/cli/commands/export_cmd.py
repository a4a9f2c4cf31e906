"""grr export <file> <dir> - Write resources to a directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from grizzly.cli.options import (
    TargetOption,
    TemplateArgument,
    get_state,
    handle_errors,
    load_resources,
    targets_of,
)
from grizzly.core.exporter import export_resources

app = typer.Typer()


@app.callback(invoke_without_command=True)
def export(
    ctx: typer.Context,
    template: Path = TemplateArgument,
    output_dir: Path = typer.Argument(help="Directory to write resources to", file_okay=False),
    target: Optional[list[str]] = TargetOption,
) -> None:
    """Write each targeted resource to <dir>/<kind>/<uid>.<ext>, skipping unchanged files."""
    state = get_state(ctx)
    with handle_errors():
        resources = load_resources(state, template)
        try:
            export_resources(
                resources, output_dir, targets_of(target), on_result=state.renderer.export_result,
            )
        except OSError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
