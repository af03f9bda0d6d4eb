"""
Record assembler.

Folds the token stream into Individual and Family records. The parser state
is an explicit, immutable ``AssemblerState`` value: each token produces the
next state, while records are appended to the dataset being built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import Iterable, Optional, Union

from gedcom_tree.dates import format_date
from gedcom_tree.loader import Token
from gedcom_tree.logging import get_logger
from gedcom_tree.registry.entities import (
    EventDetail,
    Family,
    GedcomDataset,
    Individual,
    PersonName,
    Sex,
)

log = get_logger("registry.assembler")

XREF_PATTERN = re.compile(r"@([^@]+)@")
NAME_PATTERN = re.compile(r"^([^/]*)\s*/([^/]*)/")


class RecordMode(Enum):
    NO_RECORD = "none"
    INDIVIDUAL = "INDI"
    FAMILY = "FAM"


class SubEvent(Enum):
    BIRTH = "birth"
    DEATH = "death"
    BURIAL = "burial"
    MARRIAGE = "marriage"


INDIVIDUAL_EVENTS = {
    "BIRT": SubEvent.BIRTH,
    "DEAT": SubEvent.DEATH,
    "BURI": SubEvent.BURIAL,
}


@dataclass(frozen=True)
class AssemblerState:
    """
    Where the assembler is in the token stream.

    ``record_index`` points into ``dataset.individuals`` or ``dataset.families``
    depending on ``mode``; ``sub_event`` is only meaningful inside a record.
    """
    mode: RecordMode = RecordMode.NO_RECORD
    record_index: int = -1
    sub_event: Optional[SubEvent] = None


INITIAL_STATE = AssemblerState()


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

def extract_xref(value: Optional[str], pointer: Optional[str] = None) -> Optional[str]:
    """
    Return the content between the first pair of ``@`` delimiters,
    looking at ``value`` first and ``pointer`` second.
    """
    for field_text in (value, pointer):
        if not field_text:
            continue
        match = XREF_PATTERN.search(field_text)
        if match:
            return match.group(1)
    return None


def extract_name(value: Optional[str]) -> PersonName:
    """
    Split a ``Given /Surname/`` value.

    Values that do not follow the convention keep the trimmed text as the
    full name; an empty value gives ``Unknown``.
    """
    if not value or not value.strip():
        return PersonName()

    match = NAME_PATTERN.match(value)
    if match:
        given = match.group(1).strip()
        surname = match.group(2).strip()
        return PersonName(
            full_name=f"{given} {surname}".strip(),
            given=given,
            surname=surname,
        )
    return PersonName(full_name=value.strip())


# ---------------------------------------------------------------------------
# Level-0 records
# ---------------------------------------------------------------------------

def _record_kind(token: Token) -> Optional[RecordMode]:
    if token.tag == "INDI" or (token.pointer and token.value == "INDI"):
        return RecordMode.INDIVIDUAL
    if token.tag == "FAM" or (token.pointer and token.value == "FAM"):
        return RecordMode.FAMILY
    return None


def _start_record(token: Token, dataset: GedcomDataset) -> AssemblerState:
    kind = _record_kind(token)
    if kind is None:
        return INITIAL_STATE

    record_id = extract_xref(token.pointer) or extract_xref(token.value)
    if not record_id:
        log.warning("Line %d: %s record without an id, skipped", token.lineno, kind.value)
        return INITIAL_STATE

    if kind is RecordMode.INDIVIDUAL:
        if not dataset.add_individual(Individual(id=record_id)):
            log.warning("Line %d: duplicate individual id %s", token.lineno, record_id)
        index = len(dataset.individuals) - 1
    else:
        if not dataset.add_family(Family(id=record_id)):
            log.warning("Line %d: duplicate family id %s", token.lineno, record_id)
        index = len(dataset.families) - 1

    return AssemblerState(mode=kind, record_index=index)


# ---------------------------------------------------------------------------
# Nested lines
# ---------------------------------------------------------------------------

def _event_of(record: Union[Individual, Family], sub_event: SubEvent) -> Optional[EventDetail]:
    return getattr(record, sub_event.value)


def _apply_event_detail(record, state: AssemblerState, token: Token) -> None:
    event = _event_of(record, state.sub_event)
    if event is None:
        return
    if token.tag == "DATE":
        event.date = format_date(token.value)
    elif token.tag == "PLAC":
        event.place = token.value


def _apply_individual_line(ind: Individual, state: AssemblerState, token: Token) -> AssemblerState:
    if token.level == 1:
        tag = token.tag
        if tag == "NAME":
            ind.name = extract_name(token.value)
        elif tag == "SEX":
            ind.sex = Sex.from_value(token.value)
        elif tag in INDIVIDUAL_EVENTS:
            sub_event = INDIVIDUAL_EVENTS[tag]
            setattr(ind, sub_event.value, EventDetail())
            return replace(state, sub_event=sub_event)
        elif tag in ("FAMC", "FAMS"):
            family_id = extract_xref(token.value, token.pointer)
            if family_id:
                target = ind.parents if tag == "FAMC" else ind.families
                target.append(family_id)
        return replace(state, sub_event=None)

    if token.level == 2 and state.sub_event is not None:
        _apply_event_detail(ind, state, token)

    return state


def _apply_family_line(fam: Family, state: AssemblerState, token: Token) -> AssemblerState:
    if token.level == 1:
        tag = token.tag
        if tag in ("HUSB", "WIFE", "CHIL"):
            individual_id = extract_xref(token.value, token.pointer)
            if individual_id:
                if tag == "HUSB":
                    fam.husband = individual_id
                elif tag == "WIFE":
                    fam.wife = individual_id
                else:
                    fam.add_child(individual_id)
        elif tag == "MARR":
            fam.marriage = EventDetail()
            return replace(state, sub_event=SubEvent.MARRIAGE)
        return replace(state, sub_event=None)

    if token.level == 2 and state.sub_event is SubEvent.MARRIAGE:
        _apply_event_detail(fam, state, token)

    return state


def apply_token(state: AssemblerState, token: Token, dataset: GedcomDataset) -> AssemblerState:
    """
    Advance the assembler by one token and return the next state.

    Level-0 lines open a new INDI/FAM record or close the current one;
    deeper lines only matter while a record is open.
    """
    if token.level == 0:
        return _start_record(token, dataset)

    if state.mode is RecordMode.INDIVIDUAL:
        return _apply_individual_line(dataset.individuals[state.record_index], state, token)

    if state.mode is RecordMode.FAMILY:
        return _apply_family_line(dataset.families[state.record_index], state, token)

    return state


def assemble(tokens: Iterable[Token]) -> GedcomDataset:
    """Build a dataset of assembled (not yet derived or linked) records."""
    dataset = GedcomDataset()
    reduce(lambda state, token: apply_token(state, token, dataset), tokens, INITIAL_STATE)
    return dataset
