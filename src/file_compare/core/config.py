"""Comparison configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompareConfig:
    """Immutable settings shared by the adapters and the comparator.

    ``encoding`` and ``errors`` control how text and CSV bytes are decoded.
    ``concurrent_reads`` lets the two adapters run at the same time instead
    of left-then-right.
    """

    encoding: str = "utf-8"
    errors: str = "replace"
    csv_delimiter: str = ","
    concurrent_reads: bool = False
