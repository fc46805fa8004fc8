"""JSON-file backed note store."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from reflect_mcp.errors import NoteNotFoundError
from reflect_mcp.models.notes import Note, NoteCollection, utc_now

logger = logging.getLogger(__name__)

NOTES_FILENAME = "notes.json"


class NoteStore:
    """Notes kept in memory and written through to ``<data_dir>/notes.json``.

    Mutations are serialized with a lock. Each one writes the whole
    collection to a temporary file that replaces ``notes.json``, and only
    then updates the in-memory list, so a failed write changes neither.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir).expanduser()
        self.path = self.data_dir / NOTES_FILENAME
        self._lock = threading.Lock()
        self._notes: list[Note] = self._load()

    def _load(self) -> list[Note]:
        if not self.path.exists():
            return []
        collection = NoteCollection.model_validate_json(self.path.read_text(encoding="utf-8"))
        logger.info(f"Loaded {len(collection.notes)} notes from {self.path}")
        return collection.notes

    def _save(self, notes: list[Note]) -> None:
        """Atomically replace the notes file with ``notes``."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        payload = NoteCollection(notes=notes).model_dump_json(indent=2)

        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=".notes-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def _find(self, note_id: str) -> Note:
        for note in self._notes:
            if note.id == note_id:
                return note
        raise NoteNotFoundError(note_id)

    def list_notes(self) -> list[Note]:
        with self._lock:
            return list(self._notes)

    def get_note(self, note_id: str) -> Note:
        with self._lock:
            return self._find(note_id)

    def search_notes(self, query: str) -> list[Note]:
        """Case-insensitive substring search over title, content and tags."""
        needle = query.lower()
        with self._lock:
            return [
                note
                for note in self._notes
                if needle in note.title.lower()
                or needle in note.content.lower()
                or any(needle in tag.lower() for tag in note.tags)
            ]

    def add_note(self, title: str, content: str, tags: list[str], source: str | None = None) -> Note:
        note = Note(title=title, content=content, tags=tags, source=source)
        with self._lock:
            notes = [*self._notes, note]
            self._save(notes)
            self._notes = notes
        logger.debug(f"Added note {note.id}")
        return note

    def update_note(self, note_id: str, title: str, content: str, tags: list[str]) -> Note:
        with self._lock:
            current = self._find(note_id)
            updated = current.model_copy(
                update={"title": title, "content": content, "tags": tags, "updated_at": utc_now()}
            )
            notes = [updated if note is current else note for note in self._notes]
            self._save(notes)
            self._notes = notes
        return updated

    def delete_note(self, note_id: str) -> None:
        with self._lock:
            current = self._find(note_id)
            notes = [note for note in self._notes if note is not current]
            self._save(notes)
            self._notes = notes
        logger.debug(f"Deleted note {note_id}")

    def export_json(self) -> str:
        with self._lock:
            return NoteCollection(notes=self._notes).model_dump_json(indent=2)

    def import_json(self, json_str: str) -> int:
        """Replace all notes with the contents of an exported JSON document.

        Returns:
            Number of notes imported

        Raises:
            ValueError: If the document is not a valid note export
        """
        try:
            collection = NoteCollection.model_validate_json(json_str)
        except ValidationError as e:
            raise ValueError(f"Invalid notes export: {e}") from e

        with self._lock:
            self._save(collection.notes)
            self._notes = collection.notes
        logger.info(f"Imported {len(collection.notes)} notes")
        return len(collection.notes)
