"""Textual TUI application for interactive comparison browsing."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static

from file_compare.tui.widgets.change_tree import ChangeTree
from file_compare.tui.widgets.diff_panel import DiffPanel
from file_compare.tui.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from file_compare.core.models import ComparisonResult, DiffEntry


class _StatsDisplay(Static):
    """Centered summary display for --stat mode."""

    DEFAULT_CSS = """
    _StatsDisplay {
        width: 100%;
        height: 1fr;
        content-align: center middle;
        text-align: center;
    }
    """

    def __init__(self, result: ComparisonResult) -> None:
        summary = result.summary
        content = (
            f"[bold]{summary.total_changes}[/bold] changes"
            f" ({len(result.left_content)} vs {len(result.right_content)} lines)\n\n"
            f"[green]{summary.additions} added[/green]  "
            f"[red]{summary.deletions} removed[/red]  "
            f"[yellow]{summary.modifications} modified[/yellow]"
        )
        super().__init__(content)


class FileCompareApp(App[None]):
    """Interactive TUI for browsing the differences of one comparison."""

    CSS_PATH = "styles/app.tcss"

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit"),
        Binding("s", "toggle_view", "Toggle View"),
        Binding("n", "next_diff", "Next Change"),
        Binding("p", "prev_diff", "Prev Change"),
    ]

    def __init__(self, result: ComparisonResult, *, stat_only: bool = False) -> None:
        super().__init__()
        self._result = result
        self._stat_only = stat_only

    def compose(self) -> ComposeResult:
        yield Header()
        if self._stat_only:
            yield _StatsDisplay(self._result)
        else:
            with Horizontal(id="main-container"):
                yield ChangeTree(self._result)
                yield DiffPanel()
            source = self._result.source_kind.value if self._result.source_kind else "mixed"
            yield StatusBar(self._result.summary, source=source)
        yield Footer()

    def on_tree_node_selected(self, event: ChangeTree.NodeSelected[DiffEntry]) -> None:
        """When a difference is selected, show its detail in the panel."""
        if event.node.data is None:
            return
        panel = self.query_one(DiffPanel)
        panel.update_entry(event.node.data)
        container = self.query_one("#main-container")
        if not container.has_class("split-view"):
            container.add_class("split-view")

    def action_toggle_view(self) -> None:
        """Toggle between full-tree and split tree+detail view."""
        if self._stat_only:
            return
        container = self.query_one("#main-container")
        container.toggle_class("split-view")

    def action_next_diff(self) -> None:
        """Move to the next difference in the tree."""
        if self._stat_only:
            return
        self.query_one(ChangeTree).select_next_diff()

    def action_prev_diff(self) -> None:
        """Move to the previous difference in the tree."""
        if self._stat_only:
            return
        self.query_one(ChangeTree).select_prev_diff()
