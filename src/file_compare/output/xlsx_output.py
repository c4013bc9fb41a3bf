"""Spreadsheet report for comparisons of tabular files."""

from __future__ import annotations

import io
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont
from openpyxl.styles import Alignment, Font

from file_compare.core.models import DiffKind
from file_compare.output.json_output import format_timestamp

if TYPE_CHECKING:
    from openpyxl.worksheet.worksheet import Worksheet

    from file_compare.core.models import ComparisonResult, DiffEntry

REPORT_TITLE = "Document Comparison Report"
SUMMARY_SHEET = "Summary"
DIFFERENCES_SHEET = "Differences"
DIFFERENCES_HEADER = ("Line", "Type", "Original Text", "Modified Text")

_SUMMARY_WIDTHS = {"A": 25, "B": 40}
_DIFFERENCES_WIDTHS = {"A": 8, "B": 12, "C": 60, "D": 60}
_BOLD = InlineFont(b=True)


def _set_widths(sheet: Worksheet, widths: dict[str, int]) -> None:
    for column, width in widths.items():
        sheet.column_dimensions[column].width = width


def _labeled(label: str, text: str) -> CellRichText:
    """Two-part rich text: a bold label followed by the line text."""
    return CellRichText(TextBlock(_BOLD, f"{label} "), text)


def _difference_row(entry: DiffEntry) -> list[object]:
    original: object = entry.left_text or ""
    modified: object = entry.right_text or ""
    if entry.kind == DiffKind.modified:
        original = _labeled("Original:", entry.left_text or "")
        modified = _labeled("Modified:", entry.right_text or "")
    return [entry.line + 1, entry.kind.value.title(), original, modified]


def _write_summary(sheet: Worksheet, result: ComparisonResult, timestamp: str) -> None:
    summary = result.summary
    sheet.append([REPORT_TITLE])
    sheet.append(["Generated", timestamp])
    sheet.append(["Total Changes", summary.total_changes])
    sheet.append(["Additions", summary.additions])
    sheet.append(["Deletions", summary.deletions])
    sheet.append(["Modifications", summary.modifications])
    sheet["A1"].font = Font(bold=True, size=14)
    _set_widths(sheet, _SUMMARY_WIDTHS)


def _write_differences(sheet: Worksheet, result: ComparisonResult) -> None:
    sheet.append(list(DIFFERENCES_HEADER))
    for cell in sheet[1]:
        cell.font = Font(bold=True)

    for entry in result.differences:
        sheet.append(_difference_row(entry))

    wrap = Alignment(wrap_text=True, vertical="top")
    for row in sheet.iter_rows(min_row=2, min_col=3, max_col=4):
        for cell in row:
            cell.alignment = wrap
    _set_widths(sheet, _DIFFERENCES_WIDTHS)


def build_workbook(result: ComparisonResult, *, now: datetime | None = None) -> Workbook:
    """Build the two-sheet report workbook.

    The ``Summary`` sheet holds the title, generation time, and the four
    counts. The ``Differences`` sheet holds one row per entry with 1-based
    line numbers.
    """
    workbook = Workbook()
    summary_sheet = workbook.active
    summary_sheet.title = SUMMARY_SHEET
    _write_summary(summary_sheet, result, format_timestamp(now or datetime.now(UTC)))
    _write_differences(workbook.create_sheet(DIFFERENCES_SHEET), result)
    return workbook


def render_workbook(result: ComparisonResult, *, now: datetime | None = None) -> bytes:
    """Serialize the report workbook to XLSX bytes."""
    buffer = io.BytesIO()
    build_workbook(result, now=now).save(buffer)
    return buffer.getvalue()
