"""Tests for lens discovery from a folder."""

import os
import sys
from pathlib import Path

import pytest

from lens_selector.services.discovery import DiscoveryBatch, DiscoveryFailure, discover
from lens_selector.services.lens_service import list_names, lookup_by_name


def test_missing_folder_returns_empty_batch(tmp_path):
    batch = discover(tmp_path / "does-not-exist")

    assert batch.lenses == []
    assert batch.validation_errors == {}


def test_empty_folder_returns_empty_batch(lenses_dir):
    batch = discover(str(lenses_dir))

    assert batch == DiscoveryBatch()


def test_ignores_non_json_files_and_subdirectories(lenses_dir, write_lens, valid_lens):
    write_lens("readme.md", "# lenses")
    write_lens("alpha.json.bak", valid_lens)
    (lenses_dir / "nested.json").mkdir()
    write_lens("nested.json/inner.json", valid_lens)

    batch = discover(lenses_dir)

    assert batch.lenses == []
    assert batch.validation_errors == {}


def test_valid_lens_is_discovered(lenses_dir, write_lens, valid_lens):
    write_lens("a.json", valid_lens)

    batch = discover(lenses_dir)

    assert [lens.to_json() for lens in batch.lenses] == [valid_lens]
    assert batch.validation_errors == {}


def test_unknown_fields_are_preserved(lenses_dir, write_lens, valid_lens):
    valid_lens["url"] = "http://example.org/Library/alpha"
    valid_lens["content"][0]["contentType"] = "application/javascript"
    write_lens("a.json", valid_lens)

    lens = discover(lenses_dir).lenses[0]

    assert lens.to_json() == valid_lens
    assert lens.resource_type == "Library"


def test_invalid_lens_reports_defects(lenses_dir, write_lens):
    write_lens("b.json", {"resourceType": "Library", "name": "beta"})

    batch = discover(lenses_dir)

    assert batch.lenses == []
    assert list(batch.validation_errors) == ["b.json"]
    assert len(batch.validation_errors["b.json"]) == 3


def test_unparseable_file_reports_parse_error(lenses_dir, write_lens):
    write_lens("c.json", "not valid json")

    batch = discover(lenses_dir)

    assert batch.lenses == []
    errors = batch.validation_errors["c.json"]
    assert len(errors) == 1
    assert errors[0].startswith("failed to parse: ")
    assert "Expecting value" in errors[0]


def test_non_utf8_file_reports_parse_error(lenses_dir):
    (lenses_dir / "d.json").write_bytes(b"\xff\xfe\x00{")

    batch = discover(lenses_dir)

    assert batch.validation_errors["d.json"][0].startswith("failed to parse: ")


def test_json_that_is_not_an_object(lenses_dir, write_lens):
    write_lens("list.json", "[1, 2, 3]")

    batch = discover(lenses_dir)

    assert batch.validation_errors == {"list.json": ["not a valid object"]}


def test_oversized_integer_reports_parse_error(lenses_dir, write_lens, valid_lens):
    write_lens("a.json", valid_lens)
    write_lens("big.json", "{\"id\": " + "1" * 5000 + "}")

    batch = discover(lenses_dir)

    assert list_names(batch.lenses) == ["alpha"]
    errors = batch.validation_errors["big.json"]
    assert len(errors) == 1
    assert errors[0].startswith("failed to parse: ")


def test_deeply_nested_file_reports_parse_error(lenses_dir, write_lens, valid_lens):
    write_lens("a.json", valid_lens)
    write_lens("deep.json", "[" * 200000 + "]" * 200000)

    batch = discover(lenses_dir)

    assert list_names(batch.lenses) == ["alpha"]
    assert batch.validation_errors["deep.json"][0].startswith("failed to parse: ")


def test_read_error_reports_defect_and_keeps_other_files(lenses_dir, write_lens, valid_lens, monkeypatch):
    write_lens("a.json", valid_lens)
    write_lens("b.json", {**valid_lens, "name": "beta"})
    original_read_text = Path.read_text

    def _read_text(self, *args, **kwargs):
        if self.name == "b.json":
            raise PermissionError(13, "Permission denied")
        return original_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", _read_text)

    batch = discover(lenses_dir)

    assert list_names(batch.lenses) == ["alpha"]
    assert batch.validation_errors == {"b.json": ["failed to read: Permission denied"]}


def test_mixed_folder(lenses_dir, write_lens, valid_lens):
    write_lens("a.json", valid_lens)
    write_lens("b.json", {"resourceType": "Library", "name": "beta"})
    write_lens("c.json", "{")

    batch = discover(lenses_dir)

    assert list_names(batch.lenses) == ["alpha"]
    assert lookup_by_name(batch.lenses, "alpha").id == "1"
    assert lookup_by_name(batch.lenses, "beta") is None
    assert sorted(batch.validation_errors) == ["b.json", "c.json"]


def test_lenses_follow_filename_order(lenses_dir, write_lens, valid_lens):
    for filename, name in [("b.json", "zeta"), ("a.json", "mu"), ("c.json", "alpha")]:
        write_lens(filename, {**valid_lens, "name": name})

    batch = discover(lenses_dir)

    assert [lens.name for lens in batch.lenses] == ["mu", "zeta", "alpha"]


def test_duplicate_names_first_file_wins(lenses_dir, write_lens, valid_lens):
    write_lens("b.json", {**valid_lens, "id": "second"})
    write_lens("a.json", {**valid_lens, "id": "first"})

    batch = discover(lenses_dir)

    assert len(batch.lenses) == 2
    assert lookup_by_name(batch.lenses, "alpha").id == "first"
    assert list_names(batch.lenses) == ["alpha", "alpha"]


def test_rescan_picks_up_changes(lenses_dir, write_lens, valid_lens):
    path = write_lens("a.json", valid_lens)
    assert len(discover(lenses_dir).lenses) == 1

    path.unlink()
    write_lens("b.json", {**valid_lens, "name": "beta"})

    assert list_names(discover(lenses_dir).lenses) == ["beta"]


def test_path_to_a_file_raises_discovery_failure(tmp_path):
    not_a_folder = tmp_path / "lenses.json"
    not_a_folder.write_text("{}")

    with pytest.raises(DiscoveryFailure) as exc_info:
        discover(not_a_folder)

    assert exc_info.value.directory == str(not_a_folder)
    assert isinstance(exc_info.value.__cause__, OSError)
    assert str(exc_info.value.cause) in str(exc_info.value)


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_unreadable_file_reports_read_error(lenses_dir, write_lens, valid_lens):
    path = write_lens("a.json", valid_lens)
    path.chmod(0)
    try:
        batch = discover(lenses_dir)
    finally:
        path.chmod(0o644)

    assert batch.lenses == []
    assert batch.validation_errors["a.json"][0].startswith("failed to read: ")
