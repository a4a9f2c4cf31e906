"""Data models for grizzly."""

from __future__ import annotations

from grizzly.models.diff import DiffResult, DiffStatus, ResourceDiff
from grizzly.models.resource import Manifest, Resource, ResourceList
from grizzly.models.results import (
    ApplyResult,
    ApplyStatus,
    ExportResult,
    ExportStatus,
    PreviewOpts,
)

__all__ = [
    "ApplyResult",
    "ApplyStatus",
    "DiffResult",
    "DiffStatus",
    "ExportResult",
    "ExportStatus",
    "Manifest",
    "PreviewOpts",
    "Resource",
    "ResourceDiff",
    "ResourceList",
]
