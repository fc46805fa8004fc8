"""MCP tool definitions for link analysis and notes."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

from mcp.server.fastmcp import FastMCP

from reflect_mcp.core import AppContext
from reflect_mcp.models.analysis import BatchAnalysisResponse
from reflect_mcp.models.notes import Note
from reflect_mcp.tools.service import batch_analyze_links, save_analysis_as_note

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any) -> T:
    """Run note store file I/O in the default executor."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, partial(func, *args))


class ReflectTools:
    """Tool handlers bound to one AppContext."""

    def __init__(self, context: AppContext) -> None:
        self.context = context

    async def analyze_link(self, urls: list[str], concurrency: int | None = None) -> BatchAnalysisResponse:
        """Fetch one or more web pages and summarize them with AI.

        Each URL is fetched, stripped to its readable text and analyzed into a
        summary, keywords, sentiment and reading time. Failures are reported
        per URL with an error_type of InvalidInput, NetworkError, FetchError,
        InsufficientContent, ModelUnavailable or MalformedModelOutput.

        Args:
            urls: List of URLs to analyze (must be http:// or https://)
            concurrency: Maximum number of pages analyzed at once

        Returns:
            BatchAnalysisResponse with results for all URLs
        """
        return await batch_analyze_links(urls, self.context.pipeline, concurrency or self.context.concurrency)

    async def save_link_as_note(self, url: str) -> Note:
        """Analyze a web page and save the result as a note.

        The note is titled "Article: <domain>" and tagged with "link", the
        domain and the first three keywords.

        Args:
            url: The URL to analyze (must be http:// or https://)

        Returns:
            The created note
        """
        analysis = await self.context.pipeline.analyze_link(url)
        return await run_blocking(save_analysis_as_note, analysis, self.context.notes)

    async def list_notes(self) -> list[Note]:
        """List all notes in the knowledge base."""
        return await run_blocking(self.context.notes.list_notes)

    async def get_note(self, note_id: str) -> Note:
        """Get a single note by id."""
        return await run_blocking(self.context.notes.get_note, note_id)

    async def search_notes(self, query: str) -> list[Note]:
        """Search notes by title, content and tags (case-insensitive)."""
        return await run_blocking(self.context.notes.search_notes, query)

    async def add_note(self, title: str, content: str, tags: list[str] | None = None) -> Note:
        """Create a new note.

        Args:
            title: Note title
            content: Note body
            tags: Optional list of tags

        Returns:
            The created note
        """
        return await run_blocking(self.context.notes.add_note, title, content, tags or [])

    async def update_note(self, note_id: str, title: str, content: str, tags: list[str] | None = None) -> Note:
        """Replace the title, content and tags of an existing note."""
        return await run_blocking(self.context.notes.update_note, note_id, title, content, tags or [])

    async def delete_note(self, note_id: str) -> dict[str, str]:
        """Delete a note by id."""
        await run_blocking(self.context.notes.delete_note, note_id)
        return {"status": "success", "deleted": note_id}

    async def export_notes(self) -> str:
        """Export all notes as a JSON document."""
        return await run_blocking(self.context.notes.export_json)

    async def import_notes(self, json_str: str) -> dict[str, int | str]:
        """Replace all notes with a JSON document produced by export_notes.

        WARNING: existing notes are discarded.
        """
        count = await run_blocking(self.context.notes.import_json, json_str)
        return {"status": "success", "imported": count}

    async def ask_notes(self, query: str) -> str:
        """Ask the AI assistant a question about your notes.

        Args:
            query: The question to answer

        Returns:
            The assistant's answer
        """
        notes = await run_blocking(self.context.notes.list_notes)
        return await self.context.assistant.ask(query, notes)


def register_analysis_tools(mcp: FastMCP, tools: ReflectTools) -> None:
    """Register link analysis tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
        tools: Tool handlers bound to the app context
    """
    mcp.tool()(tools.analyze_link)
    mcp.tool()(tools.save_link_as_note)


def register_note_tools(mcp: FastMCP, tools: ReflectTools) -> None:
    """Register note management and assistant tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
        tools: Tool handlers bound to the app context
    """
    mcp.tool()(tools.list_notes)
    mcp.tool()(tools.get_note)
    mcp.tool()(tools.search_notes)
    mcp.tool()(tools.add_note)
    mcp.tool()(tools.update_note)
    mcp.tool()(tools.delete_note)
    mcp.tool()(tools.export_notes)
    mcp.tool()(tools.import_notes)
    mcp.tool()(tools.ask_notes)
