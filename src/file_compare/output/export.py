"""Portable report export: JSON, or XLSX for tabular comparisons."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from file_compare.output.json_output import build_report
from file_compare.output.xlsx_output import render_workbook

if TYPE_CHECKING:
    from pathlib import Path

    from file_compare.core.models import ComparisonResult

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExportedReport:
    """Serialized report plus the filename it should be saved under."""

    content: bytes
    filename: str
    media_type: str

    def write_to(self, destination: Path) -> Path:
        """Write the report to a file, or into a directory under its filename."""
        target = destination / self.filename if destination.is_dir() else destination
        target.write_bytes(self.content)
        logger.info("Wrote %s (%d bytes)", target, len(self.content))
        return target


def export(
    result: ComparisonResult,
    *,
    workbook: bool | None = None,
    now: datetime | None = None,
) -> ExportedReport:
    """Serialize a comparison result into a portable document.

    Args:
        result: The comparison to export.
        workbook: Force (True) or suppress (False) the XLSX format. When
            None, XLSX is chosen for results carrying worksheet or row
            markers and JSON otherwise.
        now: Generation time. Defaults to the current UTC time.

    Returns:
        ExportedReport with the document bytes and a suggested filename.
    """
    now = now or datetime.now(UTC)
    stamp = int(now.timestamp() * 1000)
    use_workbook = result.is_tabular if workbook is None else workbook

    if use_workbook:
        return ExportedReport(
            content=render_workbook(result, now=now),
            filename=f"comparison-report-{stamp}.xlsx",
            media_type=XLSX_MEDIA_TYPE,
        )

    payload = json.dumps(build_report(result, now=now), indent=2, ensure_ascii=False)
    return ExportedReport(
        content=payload.encode("utf-8"),
        filename=f"comparison-report-{stamp}.json",
        media_type=JSON_MEDIA_TYPE,
    )
