"""Command-line interface for file-compare."""
