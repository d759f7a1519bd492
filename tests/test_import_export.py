"""Tests for resume JSON export and import."""

import json
import logging
from datetime import date

import pytest

from resume_builder.transfer.import_export import (
    INVALID_FORMAT_ERROR,
    READ_ERROR,
    export_filename,
    export_resumes,
    import_selected,
    parse_import,
    read_import_file,
    write_export,
)


@pytest.fixture
def populated(workspace):
    workspace.create_resume("My CV")
    workspace.update_active_resume_data(first_name="Ada", skills=[{"title": "Go"}])
    workspace.create_resume("Other")
    return workspace


class TestExport:
    def test_export_selected(self, populated):
        entries = export_resumes(populated, ["resume-1"])
        assert len(entries) == 1
        entry = entries[0]
        assert set(entry) == {"name", "data", "createdAt", "updatedAt"}
        assert entry["name"] == "My CV"
        assert entry["data"]["firstName"] == "Ada"
        assert entry["data"]["skills"] == [{"title": "Go", "description": ""}]
        assert entry["createdAt"].startswith("2024-01-01T00:00")

    def test_export_empty_selection(self, populated, caplog):
        with caplog.at_level(logging.WARNING):
            assert export_resumes(populated, ["resume-99"]) == []
        assert "No resumes to export" in caplog.text

    def test_filename_single(self, populated):
        resumes = [populated.get("resume-1")]
        assert export_filename(resumes, date(2024, 5, 1)) == "resume-my-cv-2024-05-01.json"

    def test_filename_many(self, populated):
        assert export_filename(populated.resumes_list, date(2024, 5, 1)) == "resumes-export-2024-05-01.json"

    def test_write_export(self, populated, tmp_path):
        entries = export_resumes(populated, ["resume-1", "resume-2"])
        path = write_export(tmp_path / "out" / "export.json", entries)
        assert json.loads(path.read_text(encoding="utf-8")) == entries
        assert path.read_text(encoding="utf-8").startswith("[\n  {")


class TestParseImport:
    def test_not_an_array(self):
        result = parse_import('{"name": "x"}')
        assert not result.success
        assert result.error == INVALID_FORMAT_ERROR

    def test_invalid_json(self):
        result = parse_import("{not json")
        assert not result.success
        assert result.error

    def test_previews(self):
        text = json.dumps(
            [
                {
                    "name": "Main",
                    "data": {
                        "firstName": "Ada",
                        "experiences": [{"company": "A"}, {"company": "B"}],
                        "skills": [{"title": "Go"}],
                        "internships": [{"company": "C"}],
                    },
                },
                {"name": "Empty", "data": {}},
            ]
        )
        result = parse_import(text, existing_names=["main"])
        assert result.success
        assert [p.name for p in result.previews] == ["Main", "Empty"]
        first = result.previews[0]
        assert first.is_duplicate
        assert first.item_count == 3
        assert first.data.first_name == "Ada"
        assert not result.previews[1].is_duplicate

    def test_invalid_entries_dropped(self):
        text = json.dumps(
            [
                {"name": "No data"},
                {"data": {"firstName": "x"}},
                "just a string",
                {"name": "Bad", "data": "not an object"},
                {"name": "Good", "data": {"firstName": "Ada"}},
            ]
        )
        result = parse_import(text)
        assert result.success
        assert [p.name for p in result.previews] == ["Good"]

    def test_malformed_sections_imported_as_empty(self):
        text = json.dumps(
            [
                {
                    "name": "Partial",
                    "data": {
                        "firstName": "Ada",
                        "experiences": "not a list",
                        "skills": [{"title": "Go"}, None, "Rust"],
                    },
                }
            ]
        )
        result = parse_import(text)
        assert result.success
        preview = result.previews[0]
        assert preview.data.first_name == "Ada"
        assert preview.data.experiences == []
        assert [s.title for s in preview.data.skills] == ["Go"]
        assert preview.item_count == 1

    def test_read_missing_file(self, tmp_path):
        result = read_import_file(tmp_path / "missing.json")
        assert not result.success
        assert result.error == READ_ERROR

    def test_export_then_import(self, populated, tmp_path):
        path = write_export(tmp_path / "export.json", export_resumes(populated, ["resume-1"]))
        result = read_import_file(path, [r.name for r in populated.resumes_list])
        assert result.success
        assert result.previews[0].is_duplicate
        assert result.previews[0].data == populated.get("resume-1").data


class TestImportSelected:
    def test_import_selected(self, workspace):
        result = parse_import(
            json.dumps(
                [
                    {"name": "One", "data": {"firstName": "Ada"}},
                    {"name": "Two", "data": {"firstName": "Grace"}},
                ]
            )
        )
        count = import_selected(workspace, result.previews, [1, 7])
        assert count == 1
        imported = workspace.resumes_list[0]
        assert imported.name == "Two"
        assert imported.data.first_name == "Grace"

    def test_nothing_selected(self, workspace):
        assert import_selected(workspace, [], [0]) == 0
        assert workspace.resume_count == 0
