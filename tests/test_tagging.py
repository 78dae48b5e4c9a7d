from dataclasses import asdict

import pytest
import yaml

from projman.tagging import TagAssignment, TaggingError, build_assignments, generate_tags

DEFAULT = "{category}-{subcat}-{id}"


def test_default_format_example():
    rows = [["PWR", "PSU", "Main supply"], ["PWR", "PSU", "Backup"], ["NET", "SW", "Switch"]]
    ids = [a.id for a in build_assignments(rows, DEFAULT, 1)]
    assert ids == ["PWR-PSU-01", "PWR-PSU-02", "NET-SW-01"]


def test_numbering_is_per_pair_and_starts_at_start():
    rows = [["A", "X", "1"], ["B", "X", "2"], ["A", "X", "3"], ["A", "Y", "4"], ["A", "X", "5"]]
    start = 10
    seen = {}
    for assignment in build_assignments(rows, "{id}", start):
        key = (assignment.category, assignment.subcat)
        assert int(assignment.id) == start + seen.get(key, 0)
        seen[key] = seen.get(key, 0) + 1


def test_fields_are_trimmed_and_short_rows_skipped():
    rows = [["  Cat ", " Sub", " Item  "], ["only", "two"]]
    result = build_assignments(rows, "{category}/{subcat}", 1)
    assert result == [TagAssignment("Cat/Sub", "Cat", "Sub", "Item")]


def test_empty_format_raises():
    with pytest.raises(TaggingError):
        build_assignments([["a", "b", "c"]], "", 1)


def test_generate_tags_writes_yaml_and_skips_header(tmp_path):
    src = tmp_path / "items.csv"
    src.write_text("category,subcat,name\nPWR,PSU,Main\n\nPWR,PSU,Aux\n")
    out = tmp_path / "tags.yaml"
    returned = generate_tags(src, out, DEFAULT, 1)
    loaded = yaml.safe_load(out.read_text())
    assert loaded == [asdict(a) for a in returned]
    assert [row["name"] for row in loaded] == ["Main", "Aux"]


def test_header_only_writes_empty_list(tmp_path):
    src = tmp_path / "items.csv"
    src.write_text("category,subcat,name\n")
    out = tmp_path / "tags.yaml"
    generate_tags(src, out)
    assert yaml.safe_load(out.read_text()) == []


def test_missing_csv_raises(tmp_path):
    with pytest.raises(TaggingError):
        generate_tags(tmp_path / "absent.csv", tmp_path / "out.yaml")


def test_inconsistent_field_count_raises(tmp_path):
    src = tmp_path / "items.csv"
    src.write_text("category,subcat,name\nA,B\n")
    with pytest.raises(TaggingError):
        generate_tags(src, tmp_path / "out.yaml")


def test_unwritable_output_raises(tmp_path):
    src = tmp_path / "items.csv"
    src.write_text("category,subcat,name\nA,B,C\n")
    with pytest.raises(TaggingError):
        generate_tags(src, tmp_path / "missing" / "out.yaml")