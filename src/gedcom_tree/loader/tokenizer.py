# src/gedcom_tree/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from gedcom_tree.core.exceptions import GedcomFileError
from gedcom_tree.logging import get_logger

log = get_logger("loader.tokenizer")

# <level> [<@pointer@>] <tag> [<value>]
LINE_PATTERN = re.compile(r"^(\d+)\s+(?:(@\w+@)\s+)?(\w+)(?:\s+(.*))?$", re.ASCII)


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "DATE".
        value: The trimmed line value (may be empty).
        raw: The trimmed line the token was read from.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and bare CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    The line is trimmed first. Anything that does not match
    ``<level> [<pointer>] <tag> [<value>]`` raises GedcomSyntaxError.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 1 JAN 1900"
    """
    raw = line.strip()

    # Handle optional UTF-8 BOM on the very first line.
    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff").strip()

    if not raw:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    match = LINE_PATTERN.match(raw)
    if match is None:
        raise GedcomSyntaxError(f"Line {lineno}: could not parse -> {raw!r}")

    level_str, pointer, tag, value = match.groups()

    return Token(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer,
        tag=tag,
        value=(value or "").strip(),
        raw=raw,
    )


def tokenize_text(text: str) -> Iterator[Token]:
    """
    Yield Token objects for every parseable line of ``text``.

    Blank lines are skipped silently. Lines that do not match the line grammar
    are logged and skipped; tokenizing always continues.
    """
    for lineno, line in enumerate(normalize_line_endings(text).split("\n"), start=1):
        if not line.strip() or line.strip() == "\ufeff":
            continue
        try:
            yield tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.warning("Skipping unparseable line: %s", exc)


def read_gedcom_file(path: Union[str, Path]) -> str:
    """
    Read a GEDCOM file as text.

    Undecodable bytes are replaced rather than rejected.

    Raises:
        GedcomFileError: if ``path`` is missing or cannot be read.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise GedcomFileError(f"GEDCOM file not found: {file_path}")

    try:
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise GedcomFileError(f"Could not read GEDCOM file {file_path}: {exc}") from exc
