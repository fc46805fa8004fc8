"""Note storage and the link-to-note policy."""

from reflect_mcp.notes.policy import MAX_KEYWORD_TAGS, note_fields_from_analysis
from reflect_mcp.notes.store import NoteStore

__all__ = ["MAX_KEYWORD_TAGS", "NoteStore", "note_fields_from_analysis"]
