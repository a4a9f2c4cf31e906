"""Provider capability interface.

A provider owns one resource kind: it knows where that kind lives in the
evaluated template, how to turn a branch into resources, how to render them,
and how to read and mutate them on the remote service. The pipeline never
special-cases a kind; new kinds are added by registering a new provider.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from grizzly.core.errors import ParseError, PreviewNotSupportedError
from grizzly.models.resource import Manifest, Resource, ResourceList
from grizzly.models.results import PreviewOpts

DEFAULT_API_VERSION = "grizzly.grafana.com/v1alpha1"


class Provider(ABC):
    """Base class for all resource kinds."""

    name: str = ""
    json_path: str = ""
    extension: str = "json"
    api_version: str = DEFAULT_API_VERSION
    kind: str = ""

    # Fields generated by the server. Stripped from fetched resources before
    # comparison; ``prepare_fields`` are copied back before an update.
    server_fields: tuple[str, ...] = ()
    prepare_fields: tuple[str, ...] | None = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.json_path}>"

    # Identify

    def new_resource(self, uid: str, detail: Any, filename: str = "") -> Resource:
        return Resource(
            uid=uid,
            provider=self,
            detail=detail,
            filename=filename,
            json_path=self.json_path,
        )

    # Parse

    def parse(self, raw: Any) -> ResourceList:
        """Parse a branch addressed by map key into one resource per entry."""
        resources = ResourceList()
        if raw is None:
            return resources
        if not isinstance(raw, dict):
            raise ParseError(
                f"{self.json_path}: expected an object, got {type(raw).__name__}"
            )
        for key, spec in raw.items():
            manifest = Manifest.new(self.api_version, self.kind, key, spec)
            resources.add(self.parse_manifest(manifest))
        return resources

    def parse_manifest(self, manifest: Manifest) -> Resource:
        spec = manifest.spec
        if not isinstance(spec, dict):
            raise ParseError(f"{self.kind} {manifest.name}: spec must be an object")
        detail = dict(spec)
        return self.new_resource(self.uid_of(manifest.name, detail), detail, manifest.name)

    @abstractmethod
    def uid_of(self, name: str, detail: dict) -> str:
        """Return the UID for a parsed resource."""

    # Prepare / unprepare

    def unprepare(self, resource: Resource) -> Resource:
        """Strip server-owned fields from a fetched resource."""
        detail = resource.copy_detail()
        for key in self.server_fields:
            detail.pop(key, None)
        return resource.with_detail(detail)

    def prepare(self, existing: Resource, resource: Resource) -> Resource:
        """Copy server-owned fields from ``existing`` into an outgoing resource."""
        fields = self.server_fields if self.prepare_fields is None else self.prepare_fields
        detail = resource.copy_detail()
        for key in fields:
            if key in existing.detail:
                detail[key] = existing.detail[key]
        return resource.with_detail(detail)

    # Render

    def render(self, detail: Any) -> str:
        return json.dumps(detail, indent=2, sort_keys=True)

    def get_representation(self, resource: Resource) -> str:
        return self.render(resource.detail)

    def get_remote_representation(self, uid: str) -> str:
        return self.render(self.get_remote(uid).detail)

    # Remote

    @abstractmethod
    def get_by_uid(self, uid: str) -> Resource:
        """Fetch the remote resource, raising NotFoundError if it is absent."""

    def get_remote(self, uid: str) -> Resource:
        return self.unprepare(self.get_by_uid(uid))

    @abstractmethod
    def add(self, resource: Resource) -> None:
        ...

    @abstractmethod
    def update(self, resource: Resource) -> None:
        ...

    def preview(self, resource: Resource, opts: PreviewOpts) -> str:
        """Push a non-destructive preview and return where it can be viewed."""
        raise PreviewNotSupportedError(f"{self.kind} does not support previews")
