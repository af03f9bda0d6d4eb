"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from gedcom_tree.config import get_config
from gedcom_tree.loader import Token, read_gedcom_file, tokenize_text
from gedcom_tree.logging import get_logger
from gedcom_tree.registry import (
    GedcomDataset,
    assemble,
    derive_vitals,
    link_relationships,
)


class GEDCOMParser:
    """
    High-level parser:
      - normalizes line endings and tokenizes
      - assembles INDI/FAM records
      - derives age and living status
      - links spouses and children

    ``parse_text`` never raises: any failure is logged and yields an
    empty dataset.
    """

    def __init__(self, config=None, today: Optional[date] = None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")
        self.today = today

        self.tokens: List[Token] = []
        self.dataset: Optional[GedcomDataset] = None

    # ---------------------------------------------------------
    # Parse text
    # ---------------------------------------------------------
    def parse_text(self, text) -> GedcomDataset:
        """
        Full parse sequence.
        Returns: a fresh GedcomDataset
        """
        if not isinstance(text, str) or not text:
            self.log.error("Invalid GEDCOM content: expected non-empty text")
            self.dataset = GedcomDataset()
            return self.dataset

        try:
            self.tokens = list(tokenize_text(text))
            if self.cfg.debug:
                self.log.debug(f"Token count = {len(self.tokens)}")

            dataset = assemble(self.tokens)
            derive_vitals(dataset.individuals, today=self.today)
            link_relationships(dataset)
        except Exception:
            self.log.exception("Parser run failed.")
            self.dataset = GedcomDataset()
            return self.dataset

        self.log.info(
            "Parsed %d individuals and %d families",
            len(dataset.individuals),
            len(dataset.families),
        )
        self.dataset = dataset
        return dataset

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def parse_file(self, path: Union[str, Path]) -> GedcomDataset:
        """Read ``path`` and parse it. File errors propagate as GedcomFileError."""
        self.log.info(f"Loading GEDCOM input: {path}")
        return self.parse_text(read_gedcom_file(path))


def parse(text: str, today: Optional[date] = None) -> GedcomDataset:
    """Parse GEDCOM text into a linked dataset. Never raises."""
    return GEDCOMParser(today=today).parse_text(text)


def parse_file(path: Union[str, Path], today: Optional[date] = None) -> GedcomDataset:
    return GEDCOMParser(today=today).parse_file(path)
