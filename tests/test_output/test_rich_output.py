"""Tests for file_compare.output.rich_output."""

from __future__ import annotations

import dataclasses
from io import StringIO

from rich.console import Console

from file_compare.core.models import ComparisonResult, DiffSummary, FileKind, ViewMode
from file_compare.core.text import diff_lines
from file_compare.output.base import Renderer
from file_compare.output.rich_output import RichRenderer


def _make_result(left: list[str], right: list[str]) -> ComparisonResult:
    """Helper to build a ComparisonResult for testing."""
    differences, summary = diff_lines(left, right)
    return ComparisonResult(
        source_kind=FileKind.text,
        left_name="old.txt",
        right_name="new.txt",
        left_content=tuple(left),
        right_content=tuple(right),
        differences=differences,
        summary=summary,
    )


def _renderer(view: ViewMode = ViewMode.side_by_side) -> RichRenderer:
    return RichRenderer(console=Console(file=StringIO(), width=120), view=view)


def _capture_render(renderer: RichRenderer, result: ComparisonResult) -> str:
    """Render a result and capture the output as a string."""
    renderer.render(result)
    file = renderer._console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


def _capture_stats(renderer: RichRenderer, summary: DiffSummary) -> str:
    """Render stats and capture the output as a string."""
    renderer.render_stats(summary)
    file = renderer._console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


class TestRichRendererInit:
    """Verify RichRenderer constructor."""

    def test_default_console(self) -> None:
        r = RichRenderer()
        assert r._console is not None
        assert r._view == ViewMode.side_by_side

    def test_custom_console(self) -> None:
        console = Console(file=StringIO())
        r = RichRenderer(console=console)
        assert r._console is console


class TestRichRendererStats:
    """Summary line lists each count."""

    def test_counts(self) -> None:
        output = _capture_stats(_renderer(), DiffSummary(6, 1, 2, 3))
        assert "6 changes" in output
        assert "1 added" in output
        assert "2 removed" in output
        assert "3 modified" in output


class TestRichRendererSideBySide:
    """Side-by-side table of every line index."""

    def test_header_names_both_files(self) -> None:
        output = _capture_render(_renderer(), _make_result(["a"], ["a"]))
        assert "old.txt vs new.txt" in output
        assert "Original: old.txt" in output
        assert "Modified: new.txt" in output

    def test_every_line_shown(self) -> None:
        output = _capture_render(_renderer(), _make_result(["same", "gone"], ["same", "", "new"]))
        assert "same" in output
        assert "gone" in output
        assert "new" in output
        assert "3" in output

    def test_bracketed_file_names_are_literal(self) -> None:
        result = dataclasses.replace(
            _make_result(["a"], ["b"]), left_name="v[/x].txt", right_name="[bold]n.txt"
        )
        output = _capture_render(_renderer(), result)
        assert "Original: v[/x].txt" in output
        assert "Modified: [bold]n.txt" in output

    def test_modified_line_shows_both_sides(self) -> None:
        output = _capture_render(_renderer(), _make_result(["The cat sat"], ["The dog sat"]))
        assert "The cat sat" in output
        assert "The dog sat" in output


class TestRichRendererDetailed:
    """Detailed view prints one panel per difference."""

    def test_no_differences(self) -> None:
        output = _capture_render(_renderer(ViewMode.detailed), _make_result(["a"], ["a"]))
        assert "No differences found." in output

    def test_panels_per_kind(self) -> None:
        result = _make_result(["keep", "drop", ""], ["keep", "", "add"])
        output = _capture_render(_renderer(ViewMode.detailed), result)
        assert "Line 2 (removed)" in output
        assert "- drop" in output
        assert "Line 3 (added)" in output
        assert "+ add" in output

    def test_modified_panel_shows_both_texts(self) -> None:
        result = _make_result(["cat"], ["cut"])
        output = _capture_render(_renderer(ViewMode.detailed), result)
        assert "Line 1 (modified)" in output
        assert "Original: cat" in output
        assert "Modified: cut" in output
        assert "Changes:" in output


class TestRichRendererProtocol:
    """Verify RichRenderer satisfies the Renderer protocol."""

    def test_isinstance_check(self) -> None:
        assert isinstance(RichRenderer(), Renderer)
