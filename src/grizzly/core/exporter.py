"""Write resources to a directory tree, one file per resource."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from grizzly.models.resource import Resource, ResourceList
from grizzly.models.results import ExportResult, ExportStatus

logger = logging.getLogger(__name__)


def export_path(output_dir: str | Path, resource: Resource) -> Path:
    return Path(output_dir) / resource.kind / f"{resource.uid}.{resource.provider.extension}"


def export_resource(resource: Resource, output_dir: str | Path) -> ExportResult:
    """Write a resource only if its file content would change."""
    content = resource.get_representation().encode("utf-8")
    path = export_path(output_dir, resource)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        existing = path.read_bytes()
    except FileNotFoundError:
        existing = None

    if existing == content:
        status = ExportStatus.UNCHANGED
    else:
        path.write_bytes(content)
        status = ExportStatus.ADDED if existing is None else ExportStatus.UPDATED
        logger.debug("Wrote %s (%s)", path, status.value)

    return ExportResult(kind=resource.kind, uid=resource.uid, path=path, status=status)


def export_resources(
    resources: ResourceList,
    output_dir: str | Path,
    targets: Iterable[str] | None = None,
    on_result: Callable[[ExportResult], None] | None = None,
) -> list[ExportResult]:
    results: list[ExportResult] = []
    for resource in resources.targeted(targets):
        result = export_resource(resource, output_dir)
        results.append(result)
        if on_result:
            on_result(result)
    return results
