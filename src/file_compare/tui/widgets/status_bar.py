"""Status bar widget showing diff summary counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Static

if TYPE_CHECKING:
    from file_compare.core.models import DiffSummary


class StatusBar(Static):
    """Bottom bar displaying the change count and kind breakdown."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $boost;
        color: $text;
        padding: 0 1;
    }
    """

    def __init__(self, summary: DiffSummary, *, source: str = "") -> None:
        content = (
            f"{summary.total_changes} changes | "
            f"[green]{summary.additions} added[/green] "
            f"[red]{summary.deletions} removed[/red] "
            f"[yellow]{summary.modifications} modified[/yellow]"
        )
        if source:
            content += f" | source: {source}"
        super().__init__(content)
