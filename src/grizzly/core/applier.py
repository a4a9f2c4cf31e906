"""Reconcile local resources with the remote service.

Apply is fail-fast: the first provider error stops the batch. Resources
handled before the failure stay mutated; there is no rollback.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from grizzly.core.errors import (
    GrizzlyError,
    NotFoundError,
    PreviewNotSupportedError,
    ProviderError,
)
from grizzly.models.resource import Resource, ResourceList
from grizzly.models.results import ApplyResult, ApplyStatus, PreviewOpts

logger = logging.getLogger(__name__)

ResultCallback = Callable[[ApplyResult], None]


def apply_resource(resource: Resource) -> ApplyResult:
    """Add the resource if it is absent remotely, otherwise update it."""
    provider = resource.provider
    try:
        try:
            existing = provider.get_by_uid(resource.uid)
        except NotFoundError:
            logger.debug("%s not found remotely, adding", resource.identity)
            provider.add(resource)
            return ApplyResult(kind=resource.kind, uid=resource.uid, status=ApplyStatus.ADDED)

        provider.update(provider.prepare(existing, resource))
        return ApplyResult(kind=resource.kind, uid=resource.uid, status=ApplyStatus.UPDATED)
    except GrizzlyError:
        raise
    except Exception as e:
        raise ProviderError(str(e), kind=resource.kind, uid=resource.uid) from e


def apply_resources(
    resources: ResourceList,
    targets: Iterable[str] | None = None,
    on_result: ResultCallback | None = None,
) -> list[ApplyResult]:
    results: list[ApplyResult] = []
    for resource in resources.targeted(targets):
        result = apply_resource(resource)
        results.append(result)
        if on_result:
            on_result(result)
    return results


def preview_resource(resource: Resource, opts: PreviewOpts) -> ApplyResult:
    try:
        message = resource.provider.preview(resource, opts)
    except PreviewNotSupportedError as e:
        logger.debug("Skipping preview of %s: %s", resource.identity, e)
        return ApplyResult(
            kind=resource.kind, uid=resource.uid, status=ApplyStatus.SKIPPED, message=str(e),
        )
    except GrizzlyError:
        raise
    except Exception as e:
        raise ProviderError(str(e), kind=resource.kind, uid=resource.uid) from e
    return ApplyResult(
        kind=resource.kind, uid=resource.uid, status=ApplyStatus.PREVIEWED, message=message or "",
    )


def preview_resources(
    resources: ResourceList,
    targets: Iterable[str] | None = None,
    opts: PreviewOpts | None = None,
    on_result: ResultCallback | None = None,
) -> list[ApplyResult]:
    opts = opts or PreviewOpts()
    results: list[ApplyResult] = []
    for resource in resources.targeted(targets):
        result = preview_resource(resource, opts)
        results.append(result)
        if on_result:
            on_result(result)
    return results
