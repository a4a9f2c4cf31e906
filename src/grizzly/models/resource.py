"""Manifest, Resource and ResourceList models."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping

from grizzly.core.errors import ParseError

if TYPE_CHECKING:
    from grizzly.core.provider import Provider

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("apiVersion", "kind", "metadata", "spec")


@dataclass(frozen=True)
class Manifest:
    """Raw declarative form of one resource, as produced by the evaluator."""

    data: Mapping[str, Any]

    def __post_init__(self) -> None:
        missing = [f for f in REQUIRED_FIELDS if f not in self.data]
        metadata = self.data.get("metadata")
        if "metadata" not in missing and not (isinstance(metadata, Mapping) and metadata.get("name")):
            missing.append("metadata.name")
        if missing:
            raise ParseError(f"manifest is missing required fields: {', '.join(missing)}")
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @classmethod
    def new(cls, api_version: str, kind: str, name: str, spec: Any) -> Manifest:
        return cls({
            "apiVersion": api_version,
            "kind": kind,
            "metadata": {"name": name},
            "spec": spec,
        })

    @property
    def api_version(self) -> str:
        return self.data["apiVersion"]

    @property
    def kind(self) -> str:
        return self.data["kind"]

    @property
    def name(self) -> str:
        return self.data["metadata"]["name"]

    @property
    def spec(self) -> Any:
        return self.data["spec"]


@dataclass
class Resource:
    """Canonical in-memory record of one remote object.

    ``detail`` belongs to ``provider``: nothing else looks inside it.
    """

    uid: str
    provider: Provider = field(repr=False)
    detail: Any = None
    filename: str = ""
    json_path: str = ""

    @property
    def kind(self) -> str:
        return self.provider.kind

    @property
    def key(self) -> str:
        return f"{self.kind}.{self.uid}"

    @property
    def identity(self) -> str:
        return f"{self.kind}/{self.uid}"

    def with_detail(self, detail: Any) -> Resource:
        """Return a copy of this resource carrying a different detail."""
        return Resource(
            uid=self.uid,
            provider=self.provider,
            detail=detail,
            filename=self.filename,
            json_path=self.json_path,
        )

    def copy_detail(self) -> Any:
        return copy.deepcopy(self.detail)

    def matches_target(self, targets: Iterable[str] | None) -> bool:
        """True if no targets are given or any target matches ``kind/uid``."""
        targets = list(targets or [])
        if not targets:
            return True
        return any(_match_target(t, self.kind, self.uid) for t in targets)

    def get_representation(self) -> str:
        return self.provider.get_representation(self)

    def get_remote_representation(self) -> str:
        return self.provider.get_remote_representation(self.uid)


def _match_target(target: str, kind: str, uid: str) -> bool:
    if "/" not in target:
        return fnmatchcase(uid, target)
    kind_pattern, uid_pattern = target.split("/", 1)
    return fnmatchcase(kind.lower(), kind_pattern.lower()) and fnmatchcase(uid, uid_pattern)


class ResourceList(dict):
    """Resources keyed by ``<kind>.<uid>``.

    A second resource with the same key replaces the first.
    """

    def add(self, resource: Resource) -> None:
        key = resource.key
        if key in self:
            logger.warning("Duplicate resource %s, keeping the last definition", key)
        self[key] = resource

    def merge(self, other: Mapping[str, Resource]) -> None:
        for resource in other.values():
            self.add(resource)

    def sorted(self) -> Iterator[Resource]:
        for key in sorted(self):
            yield self[key]

    def targeted(self, targets: Iterable[str] | None) -> list[Resource]:
        targets = list(targets or [])
        return [r for r in self.sorted() if r.matches_target(targets)]
