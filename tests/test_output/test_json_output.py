"""Tests for file_compare.output.json_output."""

from __future__ import annotations

import json
import sys
from datetime import UTC, datetime, timedelta, timezone
from io import StringIO

from file_compare.core.models import ComparisonResult, FileKind
from file_compare.core.text import diff_lines
from file_compare.output.base import Renderer
from file_compare.output.json_output import (
    JsonRenderer,
    build_report,
    difference_to_dict,
    format_timestamp,
)

_NOW = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)


def _make_result(left: list[str], right: list[str]) -> ComparisonResult:
    """Helper to build a ComparisonResult for testing."""
    differences, summary = diff_lines(left, right)
    return ComparisonResult(
        source_kind=FileKind.text,
        left_name="left.txt",
        right_name="right.txt",
        left_content=tuple(left),
        right_content=tuple(right),
        differences=differences,
        summary=summary,
    )


class TestFormatTimestamp:
    """Timestamps are ISO-8601 UTC with a Z suffix."""

    def test_utc(self) -> None:
        assert format_timestamp(_NOW) == "2024-05-06T07:08:09.123Z"

    def test_offset_is_converted(self) -> None:
        moment = datetime(2024, 5, 6, 9, 8, 9, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2024-05-06T07:08:09.000Z"


class TestBuildReport:
    """Verify the report structure."""

    def test_top_level_keys(self) -> None:
        report = build_report(_make_result(["a"], ["a"]), now=_NOW)
        assert set(report) == {
            "summary",
            "originalFile",
            "modifiedFile",
            "differences",
            "timestamp",
        }

    def test_summary_keys(self) -> None:
        report = build_report(_make_result(["foo"], ["foo", "bar"]), now=_NOW)
        assert report["summary"] == {
            "totalChanges": 1,
            "additions": 1,
            "deletions": 0,
            "modifications": 0,
        }

    def test_full_contents_included(self) -> None:
        report = build_report(_make_result(["a", "b"], ["a"]), now=_NOW)
        assert report["originalFile"] == ["a", "b"]
        assert report["modifiedFile"] == ["a"]

    def test_timestamp(self) -> None:
        report = build_report(_make_result([], []), now=_NOW)
        assert report["timestamp"] == "2024-05-06T07:08:09.123Z"

    def test_default_timestamp_is_now(self) -> None:
        report = build_report(_make_result([], []))
        assert report["timestamp"].endswith("Z")


class TestDifferenceToDict:
    """Absent fields are omitted rather than null."""

    def test_added(self) -> None:
        entry = _make_result(["foo"], ["foo", "bar"]).differences[0]
        assert difference_to_dict(entry) == {"line": 1, "type": "added", "rightText": "bar"}

    def test_removed(self) -> None:
        entry = _make_result(["foo"], [""]).differences[0]
        assert difference_to_dict(entry) == {"line": 0, "type": "removed", "leftText": "foo"}

    def test_modified_includes_word_diffs(self) -> None:
        entry = _make_result(["a b"], ["a c"]).differences[0]
        assert difference_to_dict(entry) == {
            "line": 0,
            "type": "modified",
            "leftText": "a b",
            "rightText": "a c",
            "wordDiffs": [
                {"type": "unchanged", "text": "a"},
                {"type": "unchanged", "text": " "},
                {"type": "removed", "text": "b"},
                {"type": "added", "text": "c"},
            ],
        }


class TestJsonRendererRender:
    """Verify render() serialization."""

    def test_default_output_is_stdout(self) -> None:
        assert JsonRenderer()._output is sys.stdout

    def test_output_is_valid_json(self) -> None:
        buf = StringIO()
        JsonRenderer(output=buf).render(_make_result(["x"], ["y"]))
        data = json.loads(buf.getvalue())
        assert data["differences"][0]["type"] == "modified"

    def test_custom_indent(self) -> None:
        buf = StringIO()
        JsonRenderer(output=buf, indent=4).render(_make_result(["x"], ["y"]))
        assert '\n    "summary"' in buf.getvalue()

    def test_non_ascii_preserved(self) -> None:
        buf = StringIO()
        JsonRenderer(output=buf).render(_make_result(["café"], ["café"]))
        assert "café" in buf.getvalue()

    def test_output_ends_with_newline(self) -> None:
        buf = StringIO()
        JsonRenderer(output=buf).render(_make_result([], []))
        assert buf.getvalue().endswith("\n")


class TestJsonRendererStats:
    """Verify render_stats() serialization."""

    def test_stats_values(self) -> None:
        buf = StringIO()
        result = _make_result(["a", "b", ""], ["a", "", "c"])
        JsonRenderer(output=buf).render_stats(result.summary)
        assert json.loads(buf.getvalue()) == {
            "totalChanges": 2,
            "additions": 1,
            "deletions": 1,
            "modifications": 0,
        }


class TestJsonRendererProtocol:
    """Verify JsonRenderer satisfies the Renderer protocol."""

    def test_isinstance_check(self) -> None:
        assert isinstance(JsonRenderer(), Renderer)
