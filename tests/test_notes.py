"""Tests for the note store and the link-to-note policy."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from reflect_mcp.errors import NoteNotFoundError
from reflect_mcp.models import LinkAnalysis
from reflect_mcp.notes import NoteStore, note_fields_from_analysis


class TestNoteStore:
    """Tests for NoteStore."""

    @pytest.fixture
    def store(self, tmp_path: Path) -> NoteStore:
        return NoteStore(tmp_path / "data")

    def test_starts_empty(self, store: NoteStore) -> None:
        assert store.list_notes() == []
        assert not store.path.exists()

    def test_add_and_get(self, store: NoteStore) -> None:
        note = store.add_note("Title", "Body", ["a", "b"])

        assert note.id
        assert store.get_note(note.id) == note
        assert store.list_notes() == [note]

    def test_persisted_across_instances(self, store: NoteStore) -> None:
        """Test that notes are written through to disk."""
        note = store.add_note("Title", "Body", ["a"], source="https://example.com")

        reloaded = NoteStore(store.data_dir)

        assert reloaded.list_notes() == [note]
        assert json.loads(store.path.read_text())["notes"][0]["source"] == "https://example.com"

    def test_update(self, store: NoteStore) -> None:
        note = store.add_note("Old", "Old body", [])

        updated = store.update_note(note.id, "New", "New body", ["x"])

        assert updated.id == note.id
        assert (updated.title, updated.content, updated.tags) == ("New", "New body", ["x"])
        assert updated.created_at == note.created_at
        assert updated.updated_at >= note.updated_at
        assert store.get_note(note.id) == updated

    def test_delete(self, store: NoteStore) -> None:
        keep = store.add_note("Keep", "", [])
        drop = store.add_note("Drop", "", [])

        store.delete_note(drop.id)

        assert store.list_notes() == [keep]
        assert NoteStore(store.data_dir).list_notes() == [keep]

    @pytest.mark.parametrize("operation", ["get", "update", "delete"])
    def test_unknown_id(self, store: NoteStore, operation: str) -> None:
        with pytest.raises(NoteNotFoundError, match="missing"):
            if operation == "get":
                store.get_note("missing")
            elif operation == "update":
                store.update_note("missing", "t", "c", [])
            else:
                store.delete_note("missing")

    def test_search(self, store: NoteStore) -> None:
        """Test case-insensitive search over title, content and tags."""
        by_title = store.add_note("Python Tips", "", [])
        by_content = store.add_note("Misc", "I like PYTHON", [])
        by_tag = store.add_note("Other", "", ["python-lang"])
        store.add_note("Groceries", "milk", ["food"])

        assert store.search_notes("python") == [by_title, by_content, by_tag]
        assert store.search_notes("nothing") == []

    def test_export_import_roundtrip(self, store: NoteStore, tmp_path: Path) -> None:
        note = store.add_note("Title", "Body", ["tag"])
        exported = store.export_json()

        other = NoteStore(tmp_path / "other")
        other.add_note("Replaced", "", [])

        assert other.import_json(exported) == 1
        assert other.list_notes() == [note]
        assert NoteStore(tmp_path / "other").list_notes() == [note]

    def test_failed_write_keeps_previous_state(self, store: NoteStore) -> None:
        """Test that an interrupted save leaves both the file and memory untouched."""
        kept = store.add_note("Kept", "", [])
        before = store.path.read_text()

        with patch("reflect_mcp.notes.store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                store.add_note("Lost", "", [])
            with pytest.raises(OSError):
                store.delete_note(kept.id)

        assert store.list_notes() == [kept]
        assert store.path.read_text() == before
        assert [p.name for p in store.data_dir.iterdir()] == ["notes.json"]
        assert NoteStore(store.data_dir).list_notes() == [kept]

    def test_import_invalid(self, store: NoteStore) -> None:
        store.add_note("Survivor", "", [])

        with pytest.raises(ValueError):
            store.import_json('{"notes": [{"title": 1}]}')
        with pytest.raises(ValueError):
            store.import_json("not json")

        assert [n.title for n in store.list_notes()] == ["Survivor"]


class TestNoteFieldsFromAnalysis:
    """Tests for note_fields_from_analysis."""

    @pytest.fixture
    def analysis(self) -> LinkAnalysis:
        return LinkAnalysis(
            url="https://news.example/article",
            domain="news.example",
            summary="A brief article about X.",
            keywords=["x", "y", "z", "w", "v"],
            sentiment="Positive",
            word_count=600,
            reading_time="3 min read",
        )

    def test_title_and_source(self, analysis: LinkAnalysis) -> None:
        fields = note_fields_from_analysis(analysis)

        assert fields["title"] == "Article: news.example"
        assert fields["source"] == "https://news.example/article"

    def test_tags_use_first_three_keywords(self, analysis: LinkAnalysis) -> None:
        assert note_fields_from_analysis(analysis)["tags"] == ["link", "news.example", "x", "y", "z"]

    def test_content(self, analysis: LinkAnalysis) -> None:
        content = note_fields_from_analysis(analysis)["content"]

        assert content == "URL: https://news.example/article\n\nA brief article about X.\n\nKeywords: x, y, z, w, v"
