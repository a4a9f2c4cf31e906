"""grr get <kind>.<uid> - Show a remote resource."""

from __future__ import annotations

import re

import typer

from grizzly.cli.options import get_state, handle_errors

app = typer.Typer()

_SEPARATOR = re.compile(r"[./]")


def split_uid(value: str) -> tuple[str, str]:
    """Split ``kind.uid`` or ``kind/uid`` at whichever separator comes first."""
    parts = _SEPARATOR.split(value, maxsplit=1)
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]
    raise typer.BadParameter(f"UID must be <kind>.<uid>: {value}")


@app.callback(invoke_without_command=True)
def get(
    ctx: typer.Context,
    resource: str = typer.Argument(help="Resource as <kind>.<uid>"),
) -> None:
    """Retrieve a resource from the remote and print its representation."""
    state = get_state(ctx)
    kind, uid = split_uid(resource)
    with handle_errors():
        provider = state.config.registry.get_provider_by_kind(kind)
        state.renderer.print_remote(provider.get_remote_representation(uid))
