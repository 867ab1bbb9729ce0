"""Scene configuration types and helpers for strings, numbers, lists, line reading and printf."""

__version__ = "0.1.0"

__all__ = ["config", "convert", "chars", "strings", "lists", "line_reader", "printf"]