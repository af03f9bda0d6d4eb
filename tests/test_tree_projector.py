from __future__ import annotations

from collections import Counter

from gedcom_tree import parse
from gedcom_tree.tree import NodeKind, TreeNode, find_root_candidates, project_tree


def _depth(node: TreeNode) -> int:
    """Number of person nodes on the longest root-to-leaf path."""
    below = max((_depth(c) for c in node.children), default=0)
    return below + (1 if node.kind is NodeKind.PERSON else 0)


def _ged(*families: str, people: int) -> str:
    lines = []
    for i in range(1, people + 1):
        lines += [f"0 @I{i}@ INDI", f"1 NAME Person{i} /Test/"]
    for fam in families:
        lines += fam.split("|")
    return "\n".join(lines)


def test_root_with_spouse_renders_couple(family_dataset):
    john = family_dataset.get_individual("I1")
    tree = project_tree(john, family_dataset.individuals)

    assert tree.kind is NodeKind.COUPLE
    assert tree.person is None
    person, spouse, unit = tree.children
    assert person.person_id == "I1"
    assert spouse.person_id == "I2"
    assert spouse.children == []
    assert unit.kind is NodeKind.FAMILY_UNIT
    assert unit.person is None

    assert tree.person_ids() == ["I1", "I2", "I3", "I4", "I5", "I6"]
    assert tree.node_count() == 10


def test_only_first_spouse_is_rendered(family_dataset):
    robert = family_dataset.get_individual("I3")
    tree = project_tree(robert, family_dataset.individuals)

    assert tree.kind is NodeKind.COUPLE
    assert tree.children[1].person_id == "I4"
    assert "I7" not in tree.person_ids()


def test_dangling_child_is_skipped(family_dataset):
    robert = family_dataset.get_individual("I3")
    unit = project_tree(robert, family_dataset.individuals).children[2]
    assert [c.person_id for c in unit.children] == ["I5", "I6"]


def test_childless_individual_without_spouse_is_a_leaf(family_dataset):
    emma = family_dataset.get_individual("I5")
    tree = project_tree(emma, family_dataset.individuals)
    assert tree.kind is NodeKind.PERSON
    assert tree.label == "Emma Smith"
    assert tree.children == []


def test_root_candidates_are_ordered_by_birth_then_name(family_dataset):
    roots = find_root_candidates(family_dataset.individuals)
    assert [r.id for r in roots] == ["I1", "I2", "I4", "I7"]


def test_forest_has_virtual_root(family_dataset):
    tree = project_tree(None, family_dataset.individuals)
    assert tree.kind is NodeKind.FAMILY_UNIT
    assert tree.label == "Family Tree"
    assert len(tree.children) == 4
    assert tree.children[0].children[0].person_id == "I1"


def test_single_root_is_returned_directly():
    ds = parse("0 @I1@ INDI\n1 NAME Solo /Person/")
    tree = project_tree(None, ds.individuals)
    assert tree.kind is NodeKind.PERSON
    assert tree.person_id == "I1"


def test_empty_dataset_projects_placeholder():
    tree = project_tree(None, [])
    assert tree.label == "Family Tree"
    assert tree.kind is NodeKind.FAMILY_UNIT
    assert tree.children == []


def test_mutual_ancestors_terminate():
    ds = parse(
        "\n".join(
            [
                "0 @I1@ INDI", "1 NAME Ann /A/", "1 FAMC @F2@", "1 FAMS @F1@",
                "0 @I2@ INDI", "1 NAME Bob /B/", "1 FAMC @F1@", "1 FAMS @F2@",
                "0 @F1@ FAM", "1 HUSB @I1@", "1 CHIL @I2@",
                "0 @F2@ FAM", "1 HUSB @I2@", "1 CHIL @I1@",
            ]
        )
    )
    # Nobody lacks parents: the first individual is used.
    tree = project_tree(None, ds.individuals)
    assert tree.person_ids() == ["I1", "I2"]
    assert tree.node_count() <= len(ds.individuals) * 4


def test_cycle_through_spouse_terminates():
    ds = parse(
        _ged(
            "0 @F1@ FAM|1 HUSB @I1@|1 WIFE @I2@|1 CHIL @I3@",
            "0 @F2@ FAM|1 HUSB @I3@|1 WIFE @I4@|1 CHIL @I1@",
            people=4,
        )
    )
    tree = project_tree(ds.get_individual("I1"), ds.individuals)
    assert Counter(tree.person_ids()) == Counter({"I1": 1, "I2": 1, "I3": 1, "I4": 1})
    assert tree.node_count() == 8


def test_spouse_already_on_path_is_not_rendered_again():
    ds = parse(
        _ged(
            "0 @F1@ FAM|1 HUSB @I1@|1 WIFE @I2@|1 CHIL @I3@",
            "0 @F2@ FAM|1 HUSB @I3@|1 WIFE @I1@",
            people=3,
        )
    )
    tree = project_tree(ds.get_individual("I1"), ds.individuals)
    grandchild = tree.children[2].children[0]
    assert grandchild.kind is NodeKind.PERSON
    assert grandchild.person_id == "I3"


def test_visited_sets_are_fork_local():
    ds = parse(
        _ged(
            "0 @F1@ FAM|1 HUSB @I1@|1 CHIL @I2@|1 CHIL @I3@",
            "0 @F2@ FAM|1 HUSB @I2@|1 WIFE @I3@|1 CHIL @I4@",
            people=4,
        )
    )
    tree = project_tree(ds.get_individual("I1"), ds.individuals)
    counts = Counter(tree.person_ids())
    # Siblings married to each other appear in both sibling branches.
    assert counts["I2"] == 2
    assert counts["I3"] == 2
    assert counts["I4"] == 2


def test_spouse_who_is_also_a_descendant_appears_in_both_branches():
    ds = parse(
        _ged(
            "0 @F1@ FAM|1 HUSB @I1@|1 WIFE @I2@|1 CHIL @I3@",
            "0 @F2@ FAM|1 HUSB @I3@|1 CHIL @I2@",
            people=3,
        )
    )
    tree = project_tree(ds.get_individual("I1"), ds.individuals)

    assert Counter(tree.person_ids()) == Counter({"I1": 1, "I2": 2, "I3": 1})
    person, spouse, unit = tree.children
    assert spouse.person_id == "I2"
    (son,) = unit.children
    assert son.person_id == "I3"
    # I1 is already on the path, so I2 is drawn alone under I3.
    (grandchild,) = son.children
    assert grandchild.kind is NodeKind.PERSON
    assert grandchild.person_id == "I2"
    assert grandchild.children == []


def test_dense_graph_paths_are_bounded():
    people = 6
    families = [
        f"0 @F{i}{j}@ FAM|1 HUSB @I{i}@|1 CHIL @I{j}@"
        for i in range(1, people + 1)
        for j in range(1, people + 1)
        if i != j
    ]
    ds = parse(_ged(*families, people=people))

    tree = project_tree(ds.get_individual("I1"), ds.individuals)
    assert _depth(tree) <= people
    for node in tree.iter_nodes():
        assert len(node.children) <= people


def test_to_dict_shape(family_dataset):
    data = project_tree(family_dataset.get_individual("I5"), family_dataset.individuals).to_dict()
    assert data == {"label": "Emma Smith", "kind": "person", "person_id": "I5", "children": []}
