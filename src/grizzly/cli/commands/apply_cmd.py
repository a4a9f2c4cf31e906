"""grr apply <file> - Push resources to the remote."""

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
from grizzly.core.applier import apply_resources

app = typer.Typer()


@app.callback(invoke_without_command=True)
def apply(
    ctx: typer.Context,
    template: Path = TemplateArgument,
    target: Optional[list[str]] = TargetOption,
) -> None:
    """Add or update every targeted resource. Stops at the first error."""
    state = get_state(ctx)
    with handle_errors():
        resources = load_resources(state, template)
        apply_resources(resources, targets_of(target), on_result=state.renderer.apply_result)
