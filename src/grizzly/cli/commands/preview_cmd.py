"""grr preview <file> - Push resources as previews."""

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
from grizzly.core.applier import preview_resources
from grizzly.models.results import PreviewOpts

app = typer.Typer()


@app.callback(invoke_without_command=True)
def preview(
    ctx: typer.Context,
    template: Path = TemplateArgument,
    target: Optional[list[str]] = TargetOption,
    expires: int = typer.Option(0, "--expires", "-e", help="Seconds until previews expire (0 = never)"),
) -> None:
    """Upload previews (e.g. dashboard snapshots) without touching the real resources."""
    state = get_state(ctx)
    with handle_errors():
        resources = load_resources(state, template)
        preview_resources(
            resources,
            targets_of(target),
            opts=PreviewOpts(expires=expires),
            on_result=state.renderer.apply_result,
        )
