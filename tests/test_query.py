from __future__ import annotations

from gedcom_tree import parse
from gedcom_tree.query import (
    birth_places,
    build_index,
    family_members_of,
    find_by_id,
    search_by_name,
)


def test_find_by_id(family_dataset):
    assert find_by_id(family_dataset, "I3").name.full_name == "Robert Smith"
    assert find_by_id(family_dataset.individuals, "I3").id == "I3"
    assert find_by_id(family_dataset, "I404") is None
    assert find_by_id(family_dataset, "") is None


def test_build_index_first_record_wins():
    ds = parse("0 @I1@ INDI\n1 NAME First /A/\n0 @I1@ INDI\n1 NAME Second /A/")
    assert build_index(ds.individuals)["I1"].name.full_name == "First A"


def test_search_by_name_is_case_insensitive(family_dataset):
    ids = [i.id for i in search_by_name(family_dataset, "smith")]
    assert ids == ["I1", "I3", "I5", "I6"]


def test_search_matches_any_field(family_dataset):
    assert [i.id for i in search_by_name(family_dataset, "ALIC")] == ["I4"]
    assert [i.id for i in search_by_name(family_dataset.individuals, "taylor")] == ["I7"]
    assert search_by_name(family_dataset, "nobody") == []


def test_family_members_of(family_dataset):
    members = family_members_of(family_dataset, family_dataset.families, "I3")
    assert members.individual.id == "I3"
    assert [p.id for p in members.parents] == ["I1", "I2"]
    assert [s.id for s in members.spouses] == ["I4", "I7"]
    assert [c.id for c in members.children] == ["I5", "I6"]


def test_family_members_drop_dangling_child(family_dataset):
    members = family_members_of(family_dataset.individuals, family_dataset.families, "I4")
    assert [c.id for c in members.children] == ["I5", "I6"]


def test_family_members_of_unknown_id(family_dataset):
    assert family_members_of(family_dataset, family_dataset.families, "I404") is None


def test_family_members_with_missing_parent_family():
    ds = parse("0 @I1@ INDI\n1 FAMC @F9@\n0 @F1@ FAM\n1 HUSB @I1@\n1 WIFE @I77@")
    members = family_members_of(ds, ds.families, "I1")
    assert members.parents == []
    assert members.spouses == []


def test_birth_places_are_distinct(family_dataset):
    assert birth_places(family_dataset) == ["London, England", "Cardiff, Wales"]
