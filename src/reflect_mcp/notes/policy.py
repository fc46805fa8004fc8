"""Turning link analyses into notes."""

from __future__ import annotations

from reflect_mcp.models.analysis import LinkAnalysis

# Only the first few keywords become tags
MAX_KEYWORD_TAGS = 3


def note_fields_from_analysis(analysis: LinkAnalysis) -> dict[str, object]:
    """Build add_note arguments for a saved link.

    Returns:
        Dictionary with ``title``, ``content``, ``tags`` and ``source``
    """
    return {
        "title": f"Article: {analysis.domain}",
        "content": f"URL: {analysis.url}\n\n{analysis.summary}\n\nKeywords: {', '.join(analysis.keywords)}",
        "tags": ["link", analysis.domain, *analysis.keywords[:MAX_KEYWORD_TAGS]],
        "source": analysis.url,
    }
