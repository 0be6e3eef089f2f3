"""Character, number, string, printf, line-reading, quoting and command-token helpers for a small shell."""

__version__ = "0.1.0"
__all__ = ["chars", "numconv", "strings", "printf", "lines", "quotes", "commands"]