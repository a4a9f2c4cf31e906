"""Status color maps."""

from __future__ import annotations

import enum

from grizzly.models.diff import DiffStatus
from grizzly.models.results import ApplyStatus, ExportStatus

STATUS_COLORS: dict[enum.Enum, str] = {
    DiffStatus.UNCHANGED: "yellow",
    DiffStatus.CHANGED: "red",
    DiffStatus.NOT_PRESENT: "yellow",
    ApplyStatus.ADDED: "green",
    ApplyStatus.UPDATED: "green",
    ApplyStatus.PREVIEWED: "green",
    ApplyStatus.SKIPPED: "dim",
    ExportStatus.ADDED: "green",
    ExportStatus.UPDATED: "green",
    ExportStatus.UNCHANGED: "yellow",
}


def styled_status(status: enum.Enum, text: str | None = None) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{text or status.value}[/{color}]"
