import json

from typer.testing import CliRunner

from gedcom_tree import parse
from gedcom_tree.cli import app
from gedcom_tree.cli.utils import life_span
from gedcom_tree.utils import mock_file_path

runner = CliRunner()
GEDCOM = str(mock_file_path("family_1.ged"))


def test_stats_command():
    result = runner.invoke(app, ["stats", GEDCOM])
    assert result.exit_code == 0, result.output
    assert "Family Statistics" in result.output
    assert "Smith" in result.output


def test_search_command():
    result = runner.invoke(app, ["search", GEDCOM, "smith"])
    assert result.exit_code == 0, result.output
    assert "Robert Smith" in result.output
    assert "Alice Brown" not in result.output
    assert "4 match(es)" in result.output


def test_person_command():
    result = runner.invoke(app, ["person", GEDCOM, "@I3@"])
    assert result.exit_code == 0, result.output
    assert "John Smith" in result.output
    assert "Alice Brown" in result.output
    assert "Emma Smith" in result.output


def test_person_command_unknown_id():
    result = runner.invoke(app, ["person", GEDCOM, "I404"])
    assert result.exit_code == 1
    assert "No individual" in result.output


def test_tree_command_with_root():
    result = runner.invoke(app, ["tree", GEDCOM, "--root", "I3"])
    assert result.exit_code == 0, result.output
    assert "Robert Smith" in result.output
    assert "Alice Brown" in result.output
    assert "Peter Smith" in result.output
    assert "Grace Taylor" not in result.output
    assert "John Smith" not in result.output


def test_tree_command_full_forest():
    result = runner.invoke(app, ["tree", GEDCOM])
    assert result.exit_code == 0, result.output
    assert "Family Tree" in result.output
    assert "Grace Taylor" in result.output


def test_places_command():
    result = runner.invoke(app, ["places", GEDCOM])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["London, England", "Cardiff, Wales"]


def test_export_command_to_file(tmp_path):
    out = tmp_path / "export.json"
    result = runner.invoke(app, ["export", GEDCOM, "--out", str(out), "--pretty"])
    assert result.exit_code == 0, result.output

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"] == {"individuals": 7, "families": 3}


def test_export_command_compact_file_in_new_directory(tmp_path):
    out = tmp_path / "nested" / "export.json"
    result = runner.invoke(app, ["export", GEDCOM, "--out", str(out)])
    assert result.exit_code == 0, result.output

    payload = out.read_text(encoding="utf-8")
    assert "\n" not in payload
    assert json.loads(payload)["counts"]["individuals"] == 7


def test_export_command_to_stdout():
    result = runner.invoke(app, ["export", GEDCOM])
    assert result.exit_code == 0, result.output
    # Log records may share the captured stream; the compact payload is one line.
    payload = next(line for line in result.output.splitlines() if line.startswith("{"))
    assert json.loads(payload)["counts"]["families"] == 3


def test_life_span_uses_parsed_years_only(family_dataset):
    assert life_span(family_dataset.get_individual("I1")) == "1900-1970"
    assert life_span(family_dataset.get_individual("I2")) == "1902-"
    # "ABT 1952" does not parse.
    assert life_span(family_dataset.get_individual("I6")) == ""


def test_life_span_ignores_unparsable_text():
    ds = parse("0 @I1@ INDI\n1 NAME Lost /Record/\n1 BIRT\n2 DATE Unknown\n1 DEAT\n2 DATE 1 JAN 1950")
    assert life_span(ds.get_individual("I1")) == "-1950"
