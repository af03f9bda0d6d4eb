from .exceptions import GedcomFileError, GedcomTreeError

__all__ = ["GedcomFileError", "GedcomTreeError"]
