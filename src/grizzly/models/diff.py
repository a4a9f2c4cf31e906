"""Diff models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class DiffStatus(enum.Enum):
    UNCHANGED = "no differences"
    CHANGED = "changes detected"
    NOT_PRESENT = "not present"


@dataclass
class ResourceDiff:
    kind: str
    uid: str
    status: DiffStatus
    diff: str = ""
    details: list[str] = field(default_factory=list)

    @property
    def identity(self) -> str:
        return f"{self.kind}/{self.uid}"

    @property
    def has_changes(self) -> bool:
        return self.status != DiffStatus.UNCHANGED


@dataclass
class DiffResult:
    diffs: list[ResourceDiff] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return any(d.has_changes for d in self.diffs)

    @property
    def summary(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for d in self.diffs:
            key = d.status.value
            counts[key] = counts.get(key, 0) + 1
        return counts
