"""grr providers - List registered providers."""

from __future__ import annotations

import typer

from grizzly.cli.options import get_state
from grizzly.output.tables import provider_table

app = typer.Typer()


@app.callback(invoke_without_command=True)
def providers(ctx: typer.Context) -> None:
    """Show every registered provider and the template path it consumes."""
    state = get_state(ctx)
    state.renderer.console.print(provider_table(state.config.registry.provider_list()))
