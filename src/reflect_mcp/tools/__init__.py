"""MCP tools for link analysis and notes.

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions and registration
- service.py: Batch analysis and link-to-note logic

Link analysis tools:
- analyze_link: Fetch, extract and summarize one or more URLs
- save_link_as_note: Analyze a URL and store the result as a note

Note tools: list, get, search, add, update, delete, export, import, and
ask_notes for AI question answering over the stored notes.
"""

from reflect_mcp.tools.router import ReflectTools, register_analysis_tools, register_note_tools
from reflect_mcp.tools.service import (
    analyze_single_url_safe,
    batch_analyze_links,
    save_analysis_as_note,
)

__all__ = [
    # Tool handlers
    "ReflectTools",
    # Registration functions
    "register_analysis_tools",
    "register_note_tools",
    # Service functions
    "analyze_single_url_safe",
    "batch_analyze_links",
    "save_analysis_as_note",
]
