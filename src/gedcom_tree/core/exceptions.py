class GedcomTreeError(Exception):
    """Base exception for gedcom_tree failures outside the parse engine."""


class GedcomFileError(GedcomTreeError):
    """Raised when a GEDCOM file cannot be located or read."""
