"""Shared styles and span rendering for console and TUI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from file_compare.core.models import DiffKind, WordKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from file_compare.core.models import WordDiffSpan

KIND_STYLES: dict[DiffKind, tuple[str, str]] = {
    DiffKind.added: ("green", "+"),
    DiffKind.removed: ("red", "-"),
    DiffKind.modified: ("yellow", "~"),
}

WORD_STYLES: dict[WordKind, str] = {
    WordKind.added: "bold green on dark_green",
    WordKind.removed: "bold red strike",
    WordKind.unchanged: "",
}


def spans_text(
    spans: Iterable[WordDiffSpan],
    *,
    include: frozenset[WordKind] = frozenset(WordKind),
) -> Text:
    """Build styled text from diff spans, keeping only the given kinds.

    Passing ``{unchanged, removed}`` rebuilds the original line and
    ``{unchanged, added}`` the modified one.
    """
    text = Text()
    for span in spans:
        if span.kind in include:
            text.append(span.text, style=WORD_STYLES[span.kind])
    return text


LEFT_SIDE = frozenset({WordKind.unchanged, WordKind.removed})
RIGHT_SIDE = frozenset({WordKind.unchanged, WordKind.added})
