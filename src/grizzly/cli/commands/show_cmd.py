"""grr show <file> - Render resources from a template."""

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
from grizzly.output.formatters import PageItem

app = typer.Typer()


@app.callback(invoke_without_command=True)
def show(
    ctx: typer.Context,
    template: Path = TemplateArgument,
    target: Optional[list[str]] = TargetOption,
) -> None:
    """Render each targeted resource as it would be sent to the remote."""
    state = get_state(ctx)
    with handle_errors():
        resources = load_resources(state, template)
        items = [
            PageItem(name=r.identity, content=r.get_representation())
            for r in resources.targeted(targets_of(target))
        ]
    state.renderer.show(items)
