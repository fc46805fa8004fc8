"""Pydantic models for notes."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(UTC)


class Note(BaseModel):
    """A note in the knowledge base."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    source: str | None = Field(default=None, description="URL the note was created from, if any")


class NoteCollection(BaseModel):
    """On-disk shape of the note store."""

    notes: list[Note] = Field(default_factory=list)
