from __future__ import annotations

from .assembler import (
    AssemblerState,
    RecordMode,
    SubEvent,
    apply_token,
    assemble,
    extract_name,
    extract_xref,
)
from .derive import derive_individual, derive_vitals
from .entities import (
    EventDetail,
    Family,
    GedcomDataset,
    Individual,
    PersonName,
    Sex,
)
from .link_entities import link_relationships

__all__ = [
    "AssemblerState",
    "EventDetail",
    "Family",
    "GedcomDataset",
    "Individual",
    "PersonName",
    "RecordMode",
    "Sex",
    "SubEvent",
    "apply_token",
    "assemble",
    "derive_individual",
    "derive_vitals",
    "extract_name",
    "extract_xref",
    "link_relationships",
]
