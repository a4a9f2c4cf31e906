"""Tests for terminal output."""

import io
from pathlib import Path
from unittest.mock import MagicMock

from rich.console import Console

from grizzly.models.diff import DiffResult, DiffStatus, ResourceDiff
from grizzly.models.results import ApplyResult, ApplyStatus, ExportResult, ExportStatus
from grizzly.output.formatters import PageItem, Renderer
from grizzly.output.themes import styled_status


def _renderer(interactive=False):
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return Renderer(interactive=interactive, console=console), buffer


class TestShow:
    def test_plain_output_labels_each_block(self):
        renderer, buffer = _renderer()
        renderer.show([PageItem("Dashboard/a", '{"uid": "a"}'), PageItem("Dashboard/b", "{}")])
        assert buffer.getvalue() == 'Dashboard/a:\n{"uid": "a"}\nDashboard/b:\n{}\n'

    def test_interactive_output_uses_pager(self):
        renderer, _ = _renderer(interactive=True)
        renderer.console.pager = MagicMock()
        renderer.show([PageItem("Dashboard/a", '{"uid": "a"}')])
        renderer.console.pager.assert_called_once_with(styles=True)

    def test_non_interactive_never_pages(self):
        renderer, _ = _renderer(interactive=False)
        renderer.console.pager = MagicMock()
        renderer.show([PageItem("Dashboard/a", "{}")])
        renderer.console.pager.assert_not_called()


class TestStatusLines:
    def test_diff_statuses(self):
        renderer, buffer = _renderer()
        renderer.diff(ResourceDiff("Dashboard", "a", DiffStatus.UNCHANGED))
        renderer.diff(ResourceDiff("Dashboard", "b", DiffStatus.NOT_PRESENT))
        renderer.diff(ResourceDiff("Dashboard", "c", DiffStatus.CHANGED, diff="-x\n+y", details=["Changed root['x']"]))
        out = buffer.getvalue()
        assert "a no differences" in out
        assert "b not present in Dashboard" in out
        assert "c changes detected:" in out
        assert "+y" in out
        assert "Changed root['x']" in out

    def test_diff_summary(self):
        renderer, buffer = _renderer()
        renderer.diff_summary(DiffResult([
            ResourceDiff("Dashboard", "a", DiffStatus.UNCHANGED),
            ResourceDiff("Dashboard", "b", DiffStatus.NOT_PRESENT),
        ]))
        assert "Changes: 1 no differences, 1 not present" in buffer.getvalue()

        renderer, buffer = _renderer()
        renderer.diff_summary(DiffResult([ResourceDiff("Dashboard", "a", DiffStatus.UNCHANGED)]))
        assert "No differences. 1 no differences" in buffer.getvalue()

    def test_markup_in_uids_and_messages_is_printed_verbatim(self):
        renderer, buffer = _renderer()
        renderer.diff(ResourceDiff("Dashboard", "[red]a[/red]", DiffStatus.UNCHANGED))
        renderer.apply_result(ApplyResult("Dashboard", "[b]", ApplyStatus.ADDED))
        renderer.apply_result(ApplyResult("Dashboard", "c", ApplyStatus.SKIPPED, "no [preview]"))
        renderer.export_result(ExportResult("Dashboard", "[bold]d", Path("d.json"), ExportStatus.ADDED))
        out = buffer.getvalue()
        assert "[red]a[/red] no differences" in out
        assert "[b] added" in out
        assert "(no [preview])" in out
        assert "[bold]d added" in out

    def test_apply_and_export_results(self):
        renderer, buffer = _renderer()
        renderer.apply_result(ApplyResult("Dashboard", "a", ApplyStatus.ADDED))
        renderer.apply_result(ApplyResult("Dashboard", "b", ApplyStatus.PREVIEWED, "http://snap"))
        renderer.export_result(ExportResult("Dashboard", "c", Path("c.json"), ExportStatus.UNCHANGED))
        out = buffer.getvalue()
        assert "a added" in out
        assert "b previewed http://snap" in out
        assert "c unchanged" in out


def test_styled_status_colors():
    assert styled_status(ApplyStatus.ADDED) == "[green]added[/green]"
    assert styled_status(DiffStatus.UNCHANGED) == "[yellow]no differences[/yellow]"
    assert styled_status(DiffStatus.NOT_PRESENT, "gone") == "[yellow]gone[/yellow]"
