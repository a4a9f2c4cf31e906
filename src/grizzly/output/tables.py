"""Rich table builders."""

from __future__ import annotations

from rich.table import Table

from grizzly.core.provider import Provider
from grizzly.models.resource import ResourceList


def resource_list_table(resources: ResourceList) -> Table:
    table = Table(expand=False, box=None, padding=(0, 4, 0, 0))
    table.add_column("KIND", style="cyan", no_wrap=True)
    table.add_column("NAME", style="bold", no_wrap=True)
    for r in resources.sorted():
        table.add_row(r.kind, r.uid)
    return table


def provider_table(providers: list[Provider]) -> Table:
    table = Table(title="Providers", expand=False)
    table.add_column("Name", style="bold")
    table.add_column("Kind", style="cyan")
    table.add_column("Path", style="magenta")
    table.add_column("Extension", style="dim")
    table.add_column("API Version", style="dim")
    for p in providers:
        table.add_row(p.name, p.kind, p.json_path, p.extension, p.api_version)
    return table
