"""
gedcom_tree: genealogical record engine.

    text --tokenize--> tokens --assemble--> records --derive--> age/alive
         --link--> spouse/children --project--> display tree

Entry points:
    parse(text) -> GedcomDataset
    project_tree(root, individuals) -> TreeNode
    find_by_id / search_by_name / family_members_of
"""

from gedcom_tree.parser_core import GEDCOMParser, parse, parse_file
from gedcom_tree.query import (
    FamilyMembers,
    birth_places,
    family_members_of,
    find_by_id,
    search_by_name,
)
from gedcom_tree.registry import (
    EventDetail,
    Family,
    GedcomDataset,
    Individual,
    PersonName,
    Sex,
)
from gedcom_tree.tree import NodeKind, TreeNode, project_tree

__version__ = "0.1.0"

__all__ = [
    "EventDetail",
    "Family",
    "FamilyMembers",
    "GEDCOMParser",
    "GedcomDataset",
    "Individual",
    "NodeKind",
    "PersonName",
    "Sex",
    "TreeNode",
    "birth_places",
    "family_members_of",
    "find_by_id",
    "parse",
    "parse_file",
    "project_tree",
    "search_by_name",
]
