"""Pydantic data models for link analysis and notes.

- LinkAnalysis: validated output of one pipeline run
- ModelReply: partial, per-field defaulted view over a model reply
- AnalysisResultItem / BatchAnalysisResponse: batch tool responses
- Note / NoteCollection: knowledge base notes and their stored form
"""

from reflect_mcp.models.analysis import (
    AnalysisResultItem,
    BatchAnalysisResponse,
    LinkAnalysis,
    ModelReply,
    Sentiment,
)
from reflect_mcp.models.notes import Note, NoteCollection

__all__ = [
    # Analysis models
    "LinkAnalysis",
    "ModelReply",
    "Sentiment",
    "AnalysisResultItem",
    "BatchAnalysisResponse",
    # Note models
    "Note",
    "NoteCollection",
]
