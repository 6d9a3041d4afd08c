"""Validation of integer lists for a stack-sorting program, with string, character and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "output", "strings", "validate"]