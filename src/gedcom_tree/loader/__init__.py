# src/gedcom_tree/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_tree.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        tokenize_text,
        read_gedcom_file,
    )
"""

from __future__ import annotations

from .tokenizer import (
    GedcomSyntaxError,
    Token,
    normalize_line_endings,
    read_gedcom_file,
    tokenize_line,
    tokenize_text,
)

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "normalize_line_endings",
    "read_gedcom_file",
    "tokenize_line",
    "tokenize_text",
]
