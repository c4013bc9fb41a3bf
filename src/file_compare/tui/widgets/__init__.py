"""TUI widgets for comparison display."""

from file_compare.tui.widgets.change_tree import ChangeTree
from file_compare.tui.widgets.diff_panel import DiffPanel
from file_compare.tui.widgets.status_bar import StatusBar

__all__ = ["ChangeTree", "DiffPanel", "StatusBar"]
