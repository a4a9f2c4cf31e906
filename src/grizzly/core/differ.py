"""Compare local resources against their remote counterparts."""

from __future__ import annotations

import difflib
import logging
from typing import Callable, Iterable

from deepdiff import DeepDiff

from grizzly.core.errors import GrizzlyError, NotFoundError, ProviderError
from grizzly.models.diff import DiffResult, DiffStatus, ResourceDiff
from grizzly.models.resource import Resource, ResourceList

logger = logging.getLogger(__name__)


def diff_resource(resource: Resource) -> ResourceDiff:
    """Compare one resource with the remote. Never mutates anything."""
    local = resource.get_representation()
    provider = resource.provider
    try:
        remote = provider.get_remote(resource.uid)
    except NotFoundError:
        return ResourceDiff(kind=resource.kind, uid=resource.uid, status=DiffStatus.NOT_PRESENT)
    except GrizzlyError:
        raise
    except Exception as e:
        raise ProviderError(
            f"error retrieving remote resource: {e}", kind=resource.kind, uid=resource.uid,
        ) from e

    remote_text = provider.render(remote.detail)
    if local == remote_text:
        return ResourceDiff(kind=resource.kind, uid=resource.uid, status=DiffStatus.UNCHANGED)

    return ResourceDiff(
        kind=resource.kind,
        uid=resource.uid,
        status=DiffStatus.CHANGED,
        diff=unified_diff(remote_text, local, resource.identity),
        details=_format_diff(DeepDiff(remote.detail, resource.detail, verbose_level=2)),
    )


def diff_resources(
    resources: ResourceList,
    targets: Iterable[str] | None = None,
    on_result: Callable[[ResourceDiff], None] | None = None,
) -> DiffResult:
    result = DiffResult()
    for resource in resources.targeted(targets):
        d = diff_resource(resource)
        result.diffs.append(d)
        if on_result:
            on_result(d)
    return result


def unified_diff(remote: str, local: str, name: str) -> str:
    lines = difflib.unified_diff(
        remote.splitlines(),
        local.splitlines(),
        fromfile=f"remote/{name}",
        tofile=f"local/{name}",
        lineterm="",
    )
    return "\n".join(lines)


def _format_diff(diff: DeepDiff) -> list[str]:
    """Format DeepDiff output into human-readable strings."""
    details: list[str] = []

    if "values_changed" in diff:
        for path, change in diff["values_changed"].items():
            old = change.get("old_value", "?")
            new = change.get("new_value", "?")
            details.append(f"Changed {path}: {old!r} -> {new!r}")

    if "dictionary_item_added" in diff:
        for path in diff["dictionary_item_added"]:
            details.append(f"Added: {path}")

    if "dictionary_item_removed" in diff:
        for path in diff["dictionary_item_removed"]:
            details.append(f"Removed: {path}")

    if "iterable_item_added" in diff:
        for path in diff["iterable_item_added"]:
            details.append(f"List item added: {path}")

    if "iterable_item_removed" in diff:
        for path in diff["iterable_item_removed"]:
            details.append(f"List item removed: {path}")

    if "type_changes" in diff:
        for path in diff["type_changes"]:
            details.append(f"Type changed: {path}")

    return details
