"""Compare text, CSV, and spreadsheet files line by line."""

__version__ = "0.1.0"
