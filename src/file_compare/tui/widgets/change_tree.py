"""Tree widget listing the differences of a comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.widgets import Tree

from file_compare.core.models import DiffEntry
from file_compare.output.styles import KIND_STYLES

if TYPE_CHECKING:
    from textual.widgets._tree import TreeNode

    from file_compare.core.models import ComparisonResult

_PREVIEW_LENGTH = 40


def _preview(entry: DiffEntry) -> str:
    """Short single-line preview of the changed text."""
    text = entry.right_text if entry.right_text is not None else entry.left_text or ""
    if len(text) > _PREVIEW_LENGTH:
        return text[: _PREVIEW_LENGTH - 1] + "…"
    return text


class ChangeTree(Tree[DiffEntry]):
    """Tree widget with one leaf per difference, grouped by kind marker."""

    DEFAULT_CSS = """
    ChangeTree {
        width: 1fr;
        min-width: 20;
        border-right: solid $accent;
    }
    """

    def __init__(self, result: ComparisonResult) -> None:
        super().__init__(Text(f"{result.left_name} vs {result.right_name}"))
        self._result = result
        self._diff_nodes: list[TreeNode[DiffEntry]] = []
        self._current_diff_index: int = -1

    def on_mount(self) -> None:
        """Populate the tree from ComparisonResult.differences."""
        self._build_tree()
        self.root.expand_all()

    def _build_tree(self) -> None:
        if not self._result.differences:
            self.root.add_leaf(Text("No differences", style="dim"))
            return

        for entry in self._result.differences:
            style, prefix = KIND_STYLES[entry.kind]
            label = Text.assemble(
                (f"{prefix} Line {entry.line + 1}", style),
                (f"  {_preview(entry)}", "dim"),
            )
            self._diff_nodes.append(self.root.add_leaf(label, data=entry))

    def select_next_diff(self) -> None:
        """Move cursor to the next difference, wrapping around."""
        if not self._diff_nodes:
            return
        self._current_diff_index = (self._current_diff_index + 1) % len(self._diff_nodes)
        node = self._diff_nodes[self._current_diff_index]
        self.select_node(node)
        self.scroll_to_node(node)

    def select_prev_diff(self) -> None:
        """Move cursor to the previous difference, wrapping around."""
        if not self._diff_nodes:
            return
        if self._current_diff_index < 0:
            self._current_diff_index = len(self._diff_nodes) - 1
        else:
            self._current_diff_index = (self._current_diff_index - 1) % len(self._diff_nodes)
        node = self._diff_nodes[self._current_diff_index]
        self.select_node(node)
        self.scroll_to_node(node)
