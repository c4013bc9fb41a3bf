"""Textual TUI for browsing comparison results."""

from file_compare.tui.app import FileCompareApp

__all__ = ["FileCompareApp"]
