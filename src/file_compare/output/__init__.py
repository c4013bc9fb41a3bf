"""Public API for file_compare.output."""

from __future__ import annotations

from file_compare.output.base import Renderer
from file_compare.output.export import ExportedReport, export
from file_compare.output.json_output import JsonRenderer, build_report
from file_compare.output.rich_output import RichRenderer
from file_compare.output.xlsx_output import build_workbook, render_workbook

__all__ = [
    "ExportedReport",
    "JsonRenderer",
    "Renderer",
    "RichRenderer",
    "build_report",
    "build_workbook",
    "export",
    "render_workbook",
]
