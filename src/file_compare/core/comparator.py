"""Comparison orchestrator: adapters -> line diff -> ComparisonResult."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from file_compare.core.adapters import build_adapters
from file_compare.core.config import CompareConfig
from file_compare.core.errors import MissingInputError
from file_compare.core.models import ComparisonResult, FileKind
from file_compare.core.text import diff_lines

if TYPE_CHECKING:
    from pathlib import Path

    from file_compare.core.models import LineSequence

logger = logging.getLogger(__name__)


class Comparator:
    """Orchestrates one comparison request.

    Validates both inputs, normalizes each through the adapter for its
    file kind, runs the positional line diff, and assembles the immutable
    ComparisonResult. Adapters run left-then-right unless
    ``config.concurrent_reads`` is set.
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        """Initialize the comparator.

        Args:
            config: Decoding and scheduling settings. Defaults to
                CompareConfig() if None.
        """
        self._config = config or CompareConfig()
        self._adapters = build_adapters(self._config)

    async def compare_files(self, left: Path | None, right: Path | None) -> ComparisonResult:
        """Compare two files.

        Args:
            left: Path to the original file.
            right: Path to the modified file.

        Returns:
            ComparisonResult with both line sequences, the differences, and
            the summary.

        Raises:
            MissingInputError: If either input is absent, before any adapter
                runs.
            AdapterError: If an adapter fails without a fallback.
        """
        left = self._validate_input(left, "Left")
        right = self._validate_input(right, "Right")
        left_kind = FileKind.from_path(left)
        right_kind = FileKind.from_path(right)
        logger.debug("Comparing %s (%s) with %s (%s)", left, left_kind, right, right_kind)

        left_lines, right_lines = await self._adapt_pair(left, left_kind, right, right_kind)
        differences, summary = diff_lines(left_lines, right_lines)

        logger.info(
            "%d changes: %d added, %d removed, %d modified",
            summary.total_changes,
            summary.additions,
            summary.deletions,
            summary.modifications,
        )
        return ComparisonResult(
            source_kind=left_kind if left_kind == right_kind else None,
            left_name=left.name,
            right_name=right.name,
            left_content=left_lines,
            right_content=right_lines,
            differences=differences,
            summary=summary,
        )

    def compare(self, left: Path | None, right: Path | None) -> ComparisonResult:
        """Blocking wrapper around :meth:`compare_files`."""
        return asyncio.run(self.compare_files(left, right))

    async def _adapt_pair(
        self,
        left: Path,
        left_kind: FileKind,
        right: Path,
        right_kind: FileKind,
    ) -> tuple[LineSequence, LineSequence]:
        """Run both adapters, concurrently when configured."""
        left_adapter = self._adapters[left_kind]
        right_adapter = self._adapters[right_kind]

        if self._config.concurrent_reads:
            left_lines, right_lines = await asyncio.gather(
                left_adapter.adapt(left),
                right_adapter.adapt(right),
            )
        else:
            left_lines = await left_adapter.adapt(left)
            right_lines = await right_adapter.adapt(right)

        logger.debug("Adapted %d left lines, %d right lines", len(left_lines), len(right_lines))
        return left_lines, right_lines

    @staticmethod
    def _validate_input(path: Path | None, label: str) -> Path:
        """Reject an absent input before any adapter runs."""
        if path is None:
            msg = f"{label} file is missing: provide files for both sides before comparing"
            raise MissingInputError(msg)
        if not path.exists():
            msg = f"{label} file does not exist: {path}"
            raise MissingInputError(msg)
        if path.is_dir():
            msg = f"{label} path is a directory, expected a file: {path}"
            raise MissingInputError(msg)
        return path


async def compare_files(
    left: Path | None,
    right: Path | None,
    *,
    config: CompareConfig | None = None,
) -> ComparisonResult:
    """Compare two files with a fresh Comparator."""
    return await Comparator(config).compare_files(left, right)
