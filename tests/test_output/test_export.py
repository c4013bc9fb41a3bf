"""Tests for file_compare.output.export."""

from __future__ import annotations

import io
import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from openpyxl import load_workbook

from file_compare.core.models import ComparisonResult, FileKind
from file_compare.core.text import diff_lines
from file_compare.output.export import JSON_MEDIA_TYPE, XLSX_MEDIA_TYPE, ExportedReport, export

if TYPE_CHECKING:
    from pathlib import Path

_NOW = datetime(2024, 5, 6, 7, 8, 9, tzinfo=UTC)
_STAMP = int(_NOW.timestamp() * 1000)


def _make_result(left: list[str], right: list[str]) -> ComparisonResult:
    """Helper to build a ComparisonResult for testing."""
    differences, summary = diff_lines(left, right)
    return ComparisonResult(
        source_kind=FileKind.text,
        left_name="left",
        right_name="right",
        left_content=tuple(left),
        right_content=tuple(right),
        differences=differences,
        summary=summary,
    )


class TestExportFormatSelection:
    """JSON for plain results, XLSX when worksheet or row markers appear."""

    def test_plain_text_exports_json(self) -> None:
        report = export(_make_result(["a"], ["b"]), now=_NOW)
        assert report.media_type == JSON_MEDIA_TYPE
        assert report.filename == f"comparison-report-{_STAMP}.json"

    def test_tabular_exports_workbook(self) -> None:
        result = _make_result(["=== WORKSHEET: S ===", "Row 1: A1:a"], ["Row 1: A1:b"])
        report = export(result, now=_NOW)
        assert report.media_type == XLSX_MEDIA_TYPE
        assert report.filename == f"comparison-report-{_STAMP}.xlsx"
        workbook = load_workbook(io.BytesIO(report.content))
        assert workbook.sheetnames == ["Summary", "Differences"]

    def test_workbook_can_be_forced(self) -> None:
        report = export(_make_result(["a"], ["b"]), workbook=True, now=_NOW)
        assert report.filename.endswith(".xlsx")

    def test_workbook_can_be_suppressed(self) -> None:
        result = _make_result(["Row 1: A1:a"], ["Row 1: A1:b"])
        report = export(result, workbook=False, now=_NOW)
        assert report.filename.endswith(".json")


class TestJsonExport:
    """The JSON export decodes into the report structure."""

    def test_content(self) -> None:
        report = export(_make_result(["foo"], ["foo", "bar"]), now=_NOW)
        data = json.loads(report.content.decode("utf-8"))
        assert data["summary"]["totalChanges"] == 1
        assert data["originalFile"] == ["foo"]
        assert data["modifiedFile"] == ["foo", "bar"]
        assert data["differences"] == [{"line": 1, "type": "added", "rightText": "bar"}]
        assert data["timestamp"] == "2024-05-06T07:08:09.000Z"


class TestExportedReportWrite:
    """write_to() accepts a file path or a directory."""

    def test_write_to_file(self, tmp_path: Path) -> None:
        report = ExportedReport(b"{}", "comparison-report-1.json", JSON_MEDIA_TYPE)
        target = report.write_to(tmp_path / "out.json")
        assert target == tmp_path / "out.json"
        assert target.read_bytes() == b"{}"

    def test_write_to_directory_uses_filename(self, tmp_path: Path) -> None:
        report = ExportedReport(b"{}", "comparison-report-1.json", JSON_MEDIA_TYPE)
        target = report.write_to(tmp_path)
        assert target == tmp_path / "comparison-report-1.json"
        assert target.exists()
