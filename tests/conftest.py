"""Shared test fixtures for file-compare."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from openpyxl import Workbook

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def sample_text_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two text files with one modified, one removed, and one added line.

    Left:  line 1 / line 2 / line 3 / (empty) / trailing
    Right: line 1 / changed line 2 / (empty) / added / trailing
    """
    left = tmp_path / "left.txt"
    right = tmp_path / "right.txt"
    left.write_text("line 1\nline 2\nline 3\n\ntrailing")
    right.write_text("line 1\nchanged line 2\n\nadded\ntrailing")
    return left, right


@pytest.fixture
def sample_csv_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two CSV files that differ in one quoted field."""
    left = tmp_path / "left.csv"
    right = tmp_path / "right.csv"
    left.write_text('name,city\nAda,"London, UK"\n\nGrace,NYC\n')
    right.write_text('name,city\nAda,"Paris, FR"\n\nGrace,NYC\n')
    return left, right


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing an XLSX file from ``{sheet: rows}``.

    Rows are lists of cell values; ``None`` leaves a cell empty.
    """

    def _make(name: str, sheets: dict[str, list[list[object]]]) -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            sheet = workbook.create_sheet(title)
            for row in rows:
                sheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return _make
