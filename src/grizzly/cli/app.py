"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler

from grizzly.cli.options import CliState
from grizzly.config.settings import Config, Settings
from grizzly.core.evaluator import JsonnetEvaluator
from grizzly.output.formatters import Renderer
from grizzly.providers import default_registry

app = typer.Typer(
    name="grr",
    help="Grizzly - manage Grafana dashboards, datasources, checks and rules from Jsonnet.",
    no_args_is_help=True,
)


def setup_logging(level: str) -> None:
    handler = RichHandler(
        console=Console(stderr=True), show_time=False, show_path=False, rich_tracebacks=True,
    )
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)


def build_state(no_pager: bool = False) -> CliState:
    settings = Settings()
    settings.interactive = sys.stdout.isatty() and not no_pager
    config = Config(
        settings=settings,
        registry=default_registry(settings),
        evaluator=JsonnetEvaluator(settings.jsonnet_paths),
    )
    return CliState(config=config, renderer=Renderer(interactive=settings.interactive))


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Log level"),
    no_pager: bool = typer.Option(False, "--no-pager", help="Never page output"),
) -> None:
    setup_logging(log_level)
    if ctx.obj is None:
        ctx.obj = build_state(no_pager=no_pager)


_SUBCOMMAND_CONTEXT = {"allow_interspersed_args": True}


def _register_commands() -> None:
    from grizzly.cli.commands.get_cmd import app as get_app
    from grizzly.cli.commands.list_cmd import app as list_app
    from grizzly.cli.commands.show_cmd import app as show_app
    from grizzly.cli.commands.diff_cmd import app as diff_app
    from grizzly.cli.commands.apply_cmd import app as apply_app
    from grizzly.cli.commands.preview_cmd import app as preview_app
    from grizzly.cli.commands.watch_cmd import app as watch_app
    from grizzly.cli.commands.export_cmd import app as export_app
    from grizzly.cli.commands.providers_cmd import app as providers_app

    app.add_typer(get_app, name="get", help="Show a remote resource", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(list_app, name="list", help="List resources defined in a template", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(show_app, name="show", help="Render resources from a template", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(diff_app, name="diff", help="Compare local resources with the remote", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(apply_app, name="apply", help="Push resources to the remote", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(preview_app, name="preview", help="Push resources as previews", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(watch_app, name="watch", help="Apply on every change in a directory", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(export_app, name="export", help="Write resources to a directory", context_settings=_SUBCOMMAND_CONTEXT)
    app.add_typer(providers_app, name="providers", help="List registered providers", context_settings=_SUBCOMMAND_CONTEXT)


_register_commands()


def main() -> None:
    app()
