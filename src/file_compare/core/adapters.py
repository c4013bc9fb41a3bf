"""Format adapters that normalize input files into line sequences.

Every adapter exposes a single coroutine, ``adapt(path)``, returning a
tuple of display lines. Adapters are looked up through a closed
``FileKind -> FormatAdapter`` mapping; unknown extensions resolve to
``FileKind.text`` and therefore to the plain-text adapter.
"""

from __future__ import annotations

import asyncio
import csv
import io
import logging
import mimetypes
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import openpyxl

from file_compare.core.config import CompareConfig
from file_compare.core.errors import AdapterError
from file_compare.core.models import WORKSHEET_MARKER, FileKind

if TYPE_CHECKING:
    import os
    from pathlib import Path

    from file_compare.core.models import LineSequence

logger = logging.getLogger(__name__)

EMPTY_WORKSHEET = "(Empty worksheet)"
_MTIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@runtime_checkable
class FormatAdapter(Protocol):
    """Protocol for converting one file into a line sequence."""

    async def adapt(self, path: Path) -> LineSequence:
        """Read the file and return its lines."""
        ...


@dataclass(frozen=True)
class ParseOutcome:
    """Result of a parse that may fail without raising.

    Exactly one of ``lines`` (on success) or ``error`` (on failure) is
    meaningful.
    """

    lines: LineSequence = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def _read_bytes(path: Path) -> bytes:
    """Read a file's bytes off the event loop."""
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        msg = f"Unable to read {path.name}: {exc.strerror or exc}"
        raise AdapterError(msg, file_path=str(path), original_error=exc) from exc


async def _stat(path: Path) -> os.stat_result:
    """Stat a file off the event loop."""
    try:
        return await asyncio.to_thread(path.stat)
    except OSError as exc:
        msg = f"Unable to read {path.name}: {exc.strerror or exc}"
        raise AdapterError(msg, file_path=str(path), original_error=exc) from exc


def _decode(data: bytes, path: Path, config: CompareConfig) -> str:
    try:
        return data.decode(config.encoding, errors=config.errors)
    except (LookupError, UnicodeDecodeError) as exc:
        msg = f"Unable to decode {path.name} as {config.encoding}: {exc}"
        raise AdapterError(msg, file_path=str(path), original_error=exc) from exc


class TextAdapter:
    """Splits decoded text on newline characters.

    An empty file yields a single empty line, and a trailing newline
    yields a trailing empty line.
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        self._config = config or CompareConfig()

    async def adapt(self, path: Path) -> LineSequence:
        data = await _read_bytes(path)
        return tuple(_decode(data, path, self._config).split("\n"))


class CsvAdapter:
    """Parses delimited text and rejoins each row into one display line.

    Fields are rejoined with a comma without re-quoting. Blank rows are
    skipped. Malformed quoting is fatal and raises AdapterError.
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        self._config = config or CompareConfig()

    async def adapt(self, path: Path) -> LineSequence:
        data = await _read_bytes(path)
        text = _decode(data, path, self._config)
        reader = csv.reader(
            io.StringIO(text, newline=""),
            delimiter=self._config.csv_delimiter,
            strict=True,
        )
        try:
            rows = [row for row in reader if row and row != [""]]
        except csv.Error as exc:
            msg = f"Unable to parse CSV file {path.name}: {exc}"
            raise AdapterError(msg, file_path=str(path), original_error=exc) from exc
        return tuple(",".join(row) for row in rows)


def _format_cell_value(value: Any) -> str:
    """Render a cell value the way a spreadsheet would display it."""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


class WorkbookAdapter:
    """Flattens every worksheet of an XLSX workbook into marker lines.

    Output per worksheet::

        === WORKSHEET: <name> ===
        Row <n>: A<n>:<value> | C<n>:<value>

    Only non-empty cells are listed; a worksheet without any values emits
    ``(Empty worksheet)``. A blank line separates consecutive worksheets.
    Parse failures never propagate: the adapter returns three fallback
    lines describing the error, the file name, and its size.
    """

    async def adapt(self, path: Path) -> LineSequence:
        try:
            data = await _read_bytes(path)
        except AdapterError as exc:
            return self._fallback(path, exc.message, size=0)

        outcome = await asyncio.to_thread(self.parse, data)
        if outcome.ok:
            return outcome.lines

        logger.warning("Falling back to metadata for workbook %s: %s", path.name, outcome.error)
        return self._fallback(path, outcome.error or "unknown error", size=len(data))

    @staticmethod
    def parse(data: bytes) -> ParseOutcome:
        """Parse workbook bytes into lines, capturing any failure."""
        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), data_only=True)
        except Exception as exc:  # openpyxl raises many unrelated types for bad input
            return ParseOutcome(error=str(exc) or type(exc).__name__)

        lines: list[str] = []
        for index, sheet in enumerate(workbook.worksheets):
            if index > 0:
                lines.append("")
            lines.append(f"{WORKSHEET_MARKER} {sheet.title} ===")

            row_lines = []
            for row in sheet.iter_rows():
                values = [
                    (cell.coordinate, _format_cell_value(cell.value))
                    for cell in row
                    if cell.value is not None
                ]
                cells = [f"{coord}:{value}" for coord, value in values if value != ""]
                if cells:
                    row_lines.append(f"Row {row[0].row}: {' | '.join(cells)}")

            lines.extend(row_lines or [EMPTY_WORKSHEET])

        workbook.close()
        return ParseOutcome(lines=tuple(lines))

    @staticmethod
    def _fallback(path: Path, error: str, *, size: int) -> LineSequence:
        return (
            f"Error processing Excel file: {error}",
            f"File name: {path.name}",
            f"Size: {size} bytes",
        )


class DocumentAdapter:
    """Placeholder for formats without content extraction (Word, PDF).

    Returns descriptive metadata lines instead of the document text.
    """

    def __init__(self, label: str) -> None:
        self._label = label

    async def adapt(self, path: Path) -> LineSequence:
        stat = await _stat(path)
        return (
            f"{self._label} processing not fully implemented yet.",
            f"File name: {path.name}",
            f"Size: {stat.st_size} bytes",
        )


class ImageAdapter:
    """Placeholder for raster images: name, size, MIME type, and mtime."""

    async def adapt(self, path: Path) -> LineSequence:
        stat = await _stat(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        modified = datetime.fromtimestamp(stat.st_mtime).strftime(_MTIME_FORMAT)
        return (
            f"Image file detected: {path.name}",
            f"Size: {stat.st_size} bytes",
            f"Type: {mime_type or 'unknown'}",
            f"Last modified: {modified}",
            "Note: Visual image comparison not yet implemented",
        )


def build_adapters(config: CompareConfig | None = None) -> dict[FileKind, FormatAdapter]:
    """Return the adapter registry, one adapter per file kind."""
    config = config or CompareConfig()
    return {
        FileKind.text: TextAdapter(config),
        FileKind.csv: CsvAdapter(config),
        FileKind.workbook: WorkbookAdapter(),
        FileKind.word: DocumentAdapter("Word document"),
        FileKind.pdf: DocumentAdapter("PDF"),
        FileKind.image: ImageAdapter(),
    }


async def adapt(path: Path, *, config: CompareConfig | None = None) -> LineSequence:
    """Normalize a file into lines using the adapter for its extension."""
    kind = FileKind.from_path(path)
    lines = await build_adapters(config)[kind].adapt(path)
    logger.debug("Adapted %s as %s: %d lines", path.name, kind, len(lines))
    return lines
