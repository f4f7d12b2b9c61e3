"""printf-style formatting with string, memory, table, list and line-reading helpers."""

__version__ = "0.1.0"