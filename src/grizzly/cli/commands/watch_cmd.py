"""grr watch <dir> <file> - Apply on every change in a directory."""

from __future__ import annotations

import signal
from pathlib import Path
from typing import Optional

import typer

from grizzly.cli.options import TargetOption, TemplateArgument, get_state, targets_of
from grizzly.core.watcher import Watcher

app = typer.Typer()


@app.callback(invoke_without_command=True)
def watch(
    ctx: typer.Context,
    watch_dir: Path = typer.Argument(help="Directory to watch", exists=True, file_okay=False),
    template: Path = TemplateArgument,
    target: Optional[list[str]] = TargetOption,
) -> None:
    """Watch a directory and apply the template whenever a file is written."""
    state = get_state(ctx)
    watcher = Watcher(
        state.config,
        watch_dir,
        template,
        targets=targets_of(target),
        on_result=state.renderer.apply_result,
    )
    signal.signal(signal.SIGTERM, lambda signum, frame: watcher.stop())
    state.renderer.console.print(f"[dim]Watching {watch_dir} for changes to apply {template}[/dim]")
    watcher.run()
