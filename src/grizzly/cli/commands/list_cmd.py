"""grr list <file> - List resources defined in a template."""

from __future__ import annotations

from pathlib import Path

import typer

from grizzly.cli.options import TemplateArgument, get_state, handle_errors, load_resources
from grizzly.output.tables import resource_list_table

app = typer.Typer()


@app.callback(invoke_without_command=True)
def list_resources(ctx: typer.Context, template: Path = TemplateArgument) -> None:
    """List the kind and name of every resource in the template."""
    state = get_state(ctx)
    with handle_errors():
        resources = load_resources(state, template)
    state.renderer.console.print(resource_list_table(resources))
