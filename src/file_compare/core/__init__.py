"""Public API for file_compare.core."""

from __future__ import annotations

from file_compare.core.adapters import (
    CsvAdapter,
    DocumentAdapter,
    FormatAdapter,
    ImageAdapter,
    ParseOutcome,
    TextAdapter,
    WorkbookAdapter,
    adapt,
    build_adapters,
)
from file_compare.core.comparator import Comparator, compare_files
from file_compare.core.config import CompareConfig
from file_compare.core.errors import AdapterError, FileCompareError, MissingInputError
from file_compare.core.models import (
    ComparisonResult,
    DiffEntry,
    DiffKind,
    DiffSummary,
    FileKind,
    LineSequence,
    OutputMode,
    ViewMode,
    WordDiffSpan,
    WordKind,
)
from file_compare.core.text import diff_chars, diff_lines, diff_words, tokenize

__all__ = [
    "AdapterError",
    "CompareConfig",
    "Comparator",
    "ComparisonResult",
    "CsvAdapter",
    "DiffEntry",
    "DiffKind",
    "DiffSummary",
    "DocumentAdapter",
    "FileCompareError",
    "FileKind",
    "FormatAdapter",
    "ImageAdapter",
    "LineSequence",
    "MissingInputError",
    "OutputMode",
    "ParseOutcome",
    "TextAdapter",
    "ViewMode",
    "WordDiffSpan",
    "WordKind",
    "WorkbookAdapter",
    "adapt",
    "build_adapters",
    "compare_files",
    "diff_chars",
    "diff_lines",
    "diff_words",
    "tokenize",
]
