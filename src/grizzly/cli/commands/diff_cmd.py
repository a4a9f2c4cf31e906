"""grr diff <file> - Compare local resources with the remote."""

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
from grizzly.core.differ import diff_resources

app = typer.Typer()


@app.callback(invoke_without_command=True)
def diff(
    ctx: typer.Context,
    template: Path = TemplateArgument,
    target: Optional[list[str]] = TargetOption,
) -> None:
    """Show the differences between local and remote resources."""
    state = get_state(ctx)
    with handle_errors():
        resources = load_resources(state, template)
        result = diff_resources(resources, targets_of(target), on_result=state.renderer.diff)
    state.renderer.diff_summary(result)
