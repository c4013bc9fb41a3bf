"""Detail panel widget showing one difference."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.widgets import Static

from file_compare.core.models import DiffKind
from file_compare.output.styles import KIND_STYLES, LEFT_SIDE, RIGHT_SIDE, spans_text

if TYPE_CHECKING:
    from file_compare.core.models import DiffEntry


class DiffPanel(Static):
    """Panel that shows the selected difference, word by word for modifications."""

    DEFAULT_CSS = """
    DiffPanel {
        width: 2fr;
        display: none;
        overflow-y: auto;
        padding: 1 2;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.last_content: str = ""

    def update_entry(self, entry: DiffEntry) -> None:
        """Render the detail for a difference."""
        rendered = self.render_entry(entry)
        self.last_content = rendered.plain
        self.update(rendered)

    @staticmethod
    def render_entry(entry: DiffEntry) -> Text:
        style, prefix = KIND_STYLES[entry.kind]
        text = Text()
        text.append(f"Line {entry.line + 1}\n", style="bold")
        text.append(f"Status: {prefix} {entry.kind.value}\n\n", style=style)

        if entry.kind == DiffKind.added:
            text.append("Modified: ", style="bold")
            text.append(f"{entry.right_text}\n", style="green")
        elif entry.kind == DiffKind.removed:
            text.append("Original: ", style="bold")
            text.append(f"{entry.left_text}\n", style="red")
        elif entry.word_diffs is not None:
            text.append("Original: ", style="bold")
            text.append_text(spans_text(entry.word_diffs, include=LEFT_SIDE))
            text.append("\nModified: ", style="bold")
            text.append_text(spans_text(entry.word_diffs, include=RIGHT_SIDE))
            text.append("\n")

        return text
