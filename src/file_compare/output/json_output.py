"""JSON report shaping and renderer."""

from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import TextIO

    from file_compare.core.models import ComparisonResult, DiffEntry, DiffSummary


def format_timestamp(moment: datetime) -> str:
    """Format a moment as ISO-8601 UTC with millisecond precision and a Z suffix."""
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def summary_to_dict(summary: DiffSummary) -> dict[str, int]:
    return {
        "totalChanges": summary.total_changes,
        "additions": summary.additions,
        "deletions": summary.deletions,
        "modifications": summary.modifications,
    }


def difference_to_dict(entry: DiffEntry) -> dict[str, Any]:
    """Serialize an entry, omitting the fields its kind does not carry."""
    data: dict[str, Any] = {"line": entry.line, "type": entry.kind.value}
    if entry.left_text is not None:
        data["leftText"] = entry.left_text
    if entry.right_text is not None:
        data["rightText"] = entry.right_text
    if entry.word_diffs is not None:
        data["wordDiffs"] = [
            {"type": span.kind.value, "text": span.text} for span in entry.word_diffs
        ]
    return data


def build_report(result: ComparisonResult, *, now: datetime | None = None) -> dict[str, Any]:
    """Shape a result into the portable JSON report structure.

    Keys: ``summary``, ``originalFile``, ``modifiedFile``, ``differences``,
    and ``timestamp``.
    """
    return {
        "summary": summary_to_dict(result.summary),
        "originalFile": list(result.left_content),
        "modifiedFile": list(result.right_content),
        "differences": [difference_to_dict(d) for d in result.differences],
        "timestamp": format_timestamp(now or datetime.now(UTC)),
    }


class JsonRenderer:
    """Renders comparison reports as JSON to a text stream.

    Output modes:
    - render(): Full report (summary, both files, differences, timestamp)
    - render_stats(): Summary counts only

    Output goes to stdout by default. Pass a custom TextIO for
    file output or testing.
    """

    def __init__(self, output: TextIO | None = None, *, indent: int = 2) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream for JSON output. Defaults to sys.stdout.
            indent: JSON indentation level. Defaults to 2.
        """
        self._output = output or sys.stdout
        self._indent = indent

    def render(self, result: ComparisonResult) -> None:
        """Serialize the full comparison report as JSON."""
        json.dump(build_report(result), self._output, indent=self._indent, ensure_ascii=False)
        self._output.write("\n")

    def render_stats(self, summary: DiffSummary) -> None:
        """Serialize summary counts as JSON."""
        json.dump(summary_to_dict(summary), self._output, indent=self._indent)
        self._output.write("\n")
