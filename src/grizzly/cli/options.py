"""Shared CLI options and helpers."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

import typer

from grizzly.config.settings import Config
from grizzly.core.errors import GrizzlyError
from grizzly.core.parser import parse
from grizzly.models.resource import ResourceList
from grizzly.output.formatters import Renderer

TargetOption = typer.Option(
    None, "--target", "-t", help="Resource to target as kind/uid (globs allowed, repeatable)",
)
TemplateArgument = typer.Argument(
    help="Jsonnet file to evaluate", exists=True, dir_okay=False, readable=True,
)


@dataclass
class CliState:
    config: Config
    renderer: Renderer


def get_state(ctx: typer.Context) -> CliState:
    return ctx.obj


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report grizzly errors on stderr and exit with status 1."""
    try:
        yield
    except GrizzlyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def load_resources(state: CliState, template: Path) -> ResourceList:
    return parse(state.config, template)


def targets_of(target: Optional[list[str]]) -> list[str]:
    return list(target or [])
