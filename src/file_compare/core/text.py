"""Positional line and word diff engines.

Both engines align the two sides strictly by index. A line (or token)
inserted near the start of one side therefore shifts every later index and
surfaces as a run of modifications rather than a single addition. There is
no common-subsequence search.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import TYPE_CHECKING

from file_compare.core.models import (
    DiffEntry,
    DiffKind,
    DiffSummary,
    WordDiffSpan,
    WordKind,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

_WHITESPACE_RUN = re.compile(r"(\s+)")


def tokenize(line: str) -> list[str]:
    """Split a line into words and whitespace runs.

    Joining the returned tokens reproduces ``line`` exactly.
    """
    return [token for token in _WHITESPACE_RUN.split(line) if token]


def _positional_spans(left: Sequence[str], right: Sequence[str]) -> tuple[WordDiffSpan, ...]:
    """Classify two token sequences index by index."""
    spans: list[WordDiffSpan] = []
    for left_token, right_token in zip_longest(left, right, fillvalue=""):
        if left_token == right_token:
            spans.append(WordDiffSpan(WordKind.unchanged, left_token))
            continue
        if left_token:
            spans.append(WordDiffSpan(WordKind.removed, left_token))
        if right_token:
            spans.append(WordDiffSpan(WordKind.added, right_token))
    return tuple(spans)


def diff_words(left_line: str, right_line: str) -> tuple[WordDiffSpan, ...]:
    """Produce the token-level diff of two lines.

    Equal tokens at the same index are ``unchanged``. Otherwise the left
    token is emitted as ``removed`` immediately followed by the right token
    as ``added``.

    Example:
        >>> [s.text for s in diff_words("The cat sat", "The dog sat")]
        ['The', ' ', 'cat', 'dog', ' ', 'sat']
    """
    return _positional_spans(tokenize(left_line), tokenize(right_line))


def diff_chars(left_line: str, right_line: str) -> tuple[WordDiffSpan, ...]:
    """Character-level variant of :func:`diff_words` for detailed views."""
    return _positional_spans(list(left_line), list(right_line))


def _classify(index: int, left_line: str, right_line: str) -> DiffEntry | None:
    if left_line == right_line:
        return None
    if not left_line:
        return DiffEntry(line=index, kind=DiffKind.added, right_text=right_line)
    if not right_line:
        return DiffEntry(line=index, kind=DiffKind.removed, left_text=left_line)
    return DiffEntry(
        line=index,
        kind=DiffKind.modified,
        left_text=left_line,
        right_text=right_line,
        word_diffs=diff_words(left_line, right_line),
    )


def diff_lines(
    left: Sequence[str],
    right: Sequence[str],
) -> tuple[tuple[DiffEntry, ...], DiffSummary]:
    """Compare two line sequences position by position.

    Indices past the end of the shorter sequence compare as empty lines.
    Equality is checked before emptiness, so two empty lines never produce
    an entry.

    Args:
        left: Lines of the original file.
        right: Lines of the modified file.

    Returns:
        The entries in increasing line order, and their summary counts.
    """
    differences: list[DiffEntry] = []
    for index, (left_line, right_line) in enumerate(zip_longest(left, right, fillvalue="")):
        entry = _classify(index, left_line, right_line)
        if entry is not None:
            differences.append(entry)

    entries = tuple(differences)
    return entries, DiffSummary.from_differences(entries)
