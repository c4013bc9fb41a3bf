"""Data models for file-compare comparison results."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

LineSequence = tuple[str, ...]

WORKSHEET_MARKER = "=== WORKSHEET:"
_ROW_MARKER = re.compile(r"^Row \d+: ")


class FileKind(StrEnum):
    """Input format family, selected by file extension."""

    text = "text"
    csv = "csv"
    workbook = "workbook"
    word = "word"
    pdf = "pdf"
    image = "image"

    @classmethod
    def from_path(cls, path: Path) -> FileKind:
        """Return the kind for a path's extension, defaulting to text."""
        return _EXTENSION_KINDS.get(path.suffix.lower().lstrip("."), cls.text)


_EXTENSION_KINDS: dict[str, FileKind] = {
    "txt": FileKind.text,
    "csv": FileKind.csv,
    "xlsx": FileKind.workbook,
    "xls": FileKind.workbook,
    "docx": FileKind.word,
    "doc": FileKind.word,
    "pdf": FileKind.pdf,
    "jpg": FileKind.image,
    "jpeg": FileKind.image,
    "png": FileKind.image,
    "gif": FileKind.image,
}


class OutputMode(StrEnum):
    """Output format for rendering results."""

    rich = "rich"
    tui = "tui"
    json = "json"
    xlsx = "xlsx"


class ViewMode(StrEnum):
    """Layout used by the console renderer."""

    side_by_side = "side_by_side"
    detailed = "detailed"


class DiffKind(StrEnum):
    """Classification of a line that differs between the two sides."""

    added = "added"
    removed = "removed"
    modified = "modified"


class WordKind(StrEnum):
    """Classification of a token within a modified line."""

    added = "added"
    removed = "removed"
    unchanged = "unchanged"


@dataclass(frozen=True)
class WordDiffSpan:
    """A single token of an intra-line diff."""

    kind: WordKind
    text: str


@dataclass(frozen=True)
class DiffEntry:
    """A classified difference at one line index (0-based)."""

    line: int
    kind: DiffKind
    left_text: str | None = None
    right_text: str | None = None
    word_diffs: tuple[WordDiffSpan, ...] | None = None


@dataclass(frozen=True)
class DiffSummary:
    """Aggregate counts over a sequence of diff entries."""

    total_changes: int
    additions: int
    deletions: int
    modifications: int

    @classmethod
    def from_differences(cls, differences: Sequence[DiffEntry]) -> DiffSummary:
        """Compute the summary by counting entry kinds."""
        return cls(
            total_changes=len(differences),
            additions=sum(1 for d in differences if d.kind == DiffKind.added),
            deletions=sum(1 for d in differences if d.kind == DiffKind.removed),
            modifications=sum(1 for d in differences if d.kind == DiffKind.modified),
        )


@dataclass(frozen=True)
class ComparisonResult:
    """Top-level result of comparing two files.

    ``source_kind`` is the kind shared by both inputs, or None when the
    two files were normalized by different adapters.
    """

    source_kind: FileKind | None
    left_name: str
    right_name: str
    left_content: LineSequence
    right_content: LineSequence
    differences: tuple[DiffEntry, ...]
    summary: DiffSummary

    @property
    def is_tabular(self) -> bool:
        """True when either side carries worksheet or row markers."""
        return any(
            line.startswith(WORKSHEET_MARKER) or _ROW_MARKER.match(line)
            for line in (*self.left_content, *self.right_content)
        )
