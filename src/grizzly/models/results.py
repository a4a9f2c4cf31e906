"""Outcome records for apply, preview and export runs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class ApplyStatus(enum.Enum):
    ADDED = "added"
    UPDATED = "updated"
    PREVIEWED = "previewed"
    SKIPPED = "skipped"


class ExportStatus(enum.Enum):
    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass
class ApplyResult:
    kind: str
    uid: str
    status: ApplyStatus
    message: str = ""

    @property
    def identity(self) -> str:
        return f"{self.kind}/{self.uid}"


@dataclass
class ExportResult:
    kind: str
    uid: str
    path: Path
    status: ExportStatus

    @property
    def written(self) -> bool:
        return self.status != ExportStatus.UNCHANGED


@dataclass
class PreviewOpts:
    expires: int = 0  # seconds, 0 means the snapshot never expires
