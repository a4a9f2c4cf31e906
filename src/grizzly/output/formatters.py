"""Status lines, diffs and paged output."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from grizzly.models.diff import DiffResult, DiffStatus, ResourceDiff
from grizzly.models.results import ApplyResult, ApplyStatus, ExportResult
from grizzly.output.themes import styled_status


@dataclass
class PageItem:
    name: str
    content: str


@dataclass
class Renderer:
    """Writes command output.

    ``interactive`` is decided once at startup; when set, ``show`` pages its
    output instead of printing labelled blocks.
    """

    interactive: bool = False
    console: Console = field(default_factory=Console)

    def show(self, items: list[PageItem]) -> None:
        if not self.interactive:
            for item in items:
                self.console.print(f"{item.name}:", markup=False, highlight=False)
                self.console.print(item.content, markup=False, highlight=False)
            return
        with self.console.pager(styles=True):
            for item in items:
                self.console.rule(f"[bold]{item.name}[/bold]")
                self.console.print(_syntax(item.content))

    def print_remote(self, content: str) -> None:
        self.console.print(content, markup=False, highlight=False)

    def diff(self, d: ResourceDiff) -> None:
        uid = escape(d.uid)
        if d.status == DiffStatus.NOT_PRESENT:
            self.console.print(f"{uid} {styled_status(d.status, f'not present in {d.kind}')}")
            return
        if d.status == DiffStatus.UNCHANGED:
            self.console.print(f"{uid} {styled_status(d.status)}")
            return
        self.console.print(f"{uid} {styled_status(d.status, 'changes detected:')}")
        if d.diff:
            self.console.print(Syntax(d.diff, "diff", theme="ansi_dark", background_color="default"))
        for detail in d.details:
            self.console.print(f"  [dim]{escape(detail)}[/dim]")

    def diff_summary(self, result: DiffResult) -> None:
        if not result.diffs:
            return
        counts = ", ".join(f"{n} {status}" for status, n in result.summary.items())
        if result.has_changes:
            self.console.print(f"\n[yellow]Changes:[/yellow] {counts}")
        else:
            self.console.print(f"\n[green]No differences.[/green] {counts}")

    def apply_result(self, result: ApplyResult) -> None:
        line = f"{escape(result.uid)} {styled_status(result.status)}"
        if result.status == ApplyStatus.PREVIEWED and result.message:
            line += f" {escape(result.message)}"
        elif result.status == ApplyStatus.SKIPPED:
            line += f" [dim]({escape(result.message or 'preview not supported')})[/dim]"
        self.console.print(line)

    def export_result(self, result: ExportResult) -> None:
        self.console.print(f"{escape(result.uid)} {styled_status(result.status)}")


def _syntax(content: str) -> Syntax:
    lexer = "json" if content.lstrip().startswith(("{", "[")) else "yaml"
    return Syntax(content, lexer, theme="monokai", line_numbers=False)
