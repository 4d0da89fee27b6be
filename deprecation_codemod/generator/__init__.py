"""Printing of rewritten sources."""

from .source_printer import Edit, SourcePrinter

__all__ = ["Edit", "SourcePrinter"]
