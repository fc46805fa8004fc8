"""Prompt templates sent to the generative model."""

from __future__ import annotations

from collections.abc import Iterable

from reflect_mcp.models.notes import Note

ANALYSIS_PROMPT = """
Analyze the following web page content.
Return ONLY a valid JSON object with these exact keys and nothing else:

{{
  "summary": "A concise, objective summary (max 3 sentences)",
  "keywords": ["tag1", "tag2", "tag3", "tag4", "tag5"],
  "sentiment": "Positive" | "Neutral" | "Negative",
  "readingTime": "Estimated reading time (e.g., '5 min read')"
}}

Web Page Content:
{text}
"""

ASSISTANT_PROMPT = """
You are an intelligent assistant for a personal knowledge base.
Here are the user's notes:

{notes}

User Question: "{query}"

Instructions:
- Answer based strictly on the provided notes if possible.
- If the answer isn't in the notes, use your general knowledge but mention that it's not in the notes.
- Be concise and helpful.
"""


def build_analysis_prompt(text: str) -> str:
    """Build the JSON-only analysis prompt for extracted page text."""
    return ANALYSIS_PROMPT.format(text=text)


def format_notes_context(notes: Iterable[Note]) -> str:
    return "\n---\n".join(
        f"Title: {note.title}\nTags: [{', '.join(note.tags)}]\nContent: {note.content}" for note in notes
    )


def build_assistant_prompt(query: str, notes: Iterable[Note]) -> str:
    """Build the question-answering prompt over the user's notes."""
    return ASSISTANT_PROMPT.format(notes=format_notes_context(notes), query=query)
