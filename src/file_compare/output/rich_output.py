"""Rich console renderer (default output mode)."""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from file_compare.core.models import DiffKind, ViewMode
from file_compare.core.text import diff_chars
from file_compare.output.styles import KIND_STYLES, LEFT_SIDE, RIGHT_SIDE, spans_text

if TYPE_CHECKING:
    from file_compare.core.models import ComparisonResult, DiffEntry, DiffSummary


class RichRenderer:
    """Renders comparison results in one of two layouts.

    Layouts:
    - side_by_side: a table of every line index with both sides, changed
      lines color-coded and modified lines highlighted word by word
    - detailed: one panel per difference, with a character-level diff for
      modified lines

    Kind indicators (shared across layouts):
    - Added: green with '+' prefix
    - Removed: red with '-' prefix
    - Modified: yellow with '~' prefix
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        view: ViewMode = ViewMode.side_by_side,
    ) -> None:
        """Initialize with an optional Rich console.

        Args:
            console: Rich Console instance. Defaults to Console() if None.
            view: Layout to render. Defaults to side by side.
        """
        self._console = console or Console()
        self._view = view

    def render(self, result: ComparisonResult) -> None:
        """Render the comparison result in the configured layout."""
        self._console.print(
            Text(f"{result.left_name} vs {result.right_name}", style="bold"),
        )
        self.render_stats(result.summary)
        self._console.print()

        if self._view == ViewMode.detailed:
            self._render_detailed(result)
        else:
            self._render_side_by_side(result)

    def render_stats(self, summary: DiffSummary) -> None:
        """Render summary counts."""
        self._console.print(
            f"[bold]{summary.total_changes}[/bold] changes: "
            f"[green]{summary.additions} added[/green], "
            f"[red]{summary.deletions} removed[/red], "
            f"[yellow]{summary.modifications} modified[/yellow]"
        )

    # -- Side-by-side rendering -------------------------------------------

    def _render_side_by_side(self, result: ComparisonResult) -> None:
        """Render every line index with both sides next to each other."""
        table = Table(show_lines=False, expand=True)
        table.add_column("#", justify="right", style="dim", no_wrap=True)
        table.add_column(Text(f"Original: {result.left_name}"), ratio=1)
        table.add_column(Text(f"Modified: {result.right_name}"), ratio=1)

        by_line = {entry.line: entry for entry in result.differences}
        rows = zip_longest(result.left_content, result.right_content)
        for index, (left_line, right_line) in enumerate(rows):
            entry = by_line.get(index)
            left_cell, right_cell = self._side_cells(entry, left_line, right_line)
            table.add_row(str(index + 1), left_cell, right_cell)

        self._console.print(table)

    @staticmethod
    def _side_cells(
        entry: DiffEntry | None,
        left_line: str | None,
        right_line: str | None,
    ) -> tuple[Text, Text]:
        """Return styled cells for one line index."""
        left = Text(left_line or "")
        right = Text(right_line or "")
        if entry is None:
            left.stylize("dim")
            right.stylize("dim")
        elif entry.kind == DiffKind.added:
            right.stylize("green")
        elif entry.kind == DiffKind.removed:
            left.stylize("red")
        elif entry.word_diffs is not None:
            left = spans_text(entry.word_diffs, include=LEFT_SIDE)
            right = spans_text(entry.word_diffs, include=RIGHT_SIDE)
        return left, right

    # -- Detailed rendering -----------------------------------------------

    def _render_detailed(self, result: ComparisonResult) -> None:
        """Render one panel per difference."""
        if not result.differences:
            self._console.print("[dim]No differences found.[/dim]")
            return

        for entry in result.differences:
            self._console.print(self._entry_panel(entry))

    @staticmethod
    def _entry_panel(entry: DiffEntry) -> Panel:
        """Build the panel for a single difference."""
        style, prefix = KIND_STYLES[entry.kind]
        title = f"[{style}]{prefix} Line {entry.line + 1} ({entry.kind.value})[/{style}]"

        if entry.kind == DiffKind.added:
            body: Text | Group = Text(f"+ {entry.right_text}", style="green")
        elif entry.kind == DiffKind.removed:
            body = Text(f"- {entry.left_text}", style="red")
        else:
            left_text = entry.left_text or ""
            right_text = entry.right_text or ""
            body = Group(
                Text.assemble(("Original: ", "bold"), left_text),
                Text.assemble(("Modified: ", "bold"), right_text),
                Text.assemble(
                    ("Changes:  ", "bold"),
                    spans_text(diff_chars(left_text, right_text)),
                ),
            )

        return Panel(body, title=title, title_align="left", border_style=style, expand=True)
