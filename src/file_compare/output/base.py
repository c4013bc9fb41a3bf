"""Renderer protocol for comparison output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from file_compare.core.models import ComparisonResult, DiffSummary


@runtime_checkable
class Renderer(Protocol):
    """Protocol for rendering comparison results.

    Implementations must provide render and render_stats methods that
    write output to the appropriate destination (console, stream, etc.).
    """

    def render(self, result: ComparisonResult) -> None:
        """Render the comparison result."""
        ...

    def render_stats(self, summary: DiffSummary) -> None:
        """Render the summary counts only."""
        ...
