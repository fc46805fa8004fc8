"""Business logic for link analysis tools."""

from __future__ import annotations

import asyncio
import logging

from reflect_mcp.errors import LinkAnalysisError
from reflect_mcp.models.analysis import AnalysisResultItem, BatchAnalysisResponse, LinkAnalysis
from reflect_mcp.models.notes import Note
from reflect_mcp.notes import NoteStore, note_fields_from_analysis
from reflect_mcp.pipeline import LinkAnalysisPipeline

logger = logging.getLogger(__name__)


async def analyze_single_url_safe(
    url: str,
    pipeline: LinkAnalysisPipeline,
    semaphore: asyncio.Semaphore,
) -> AnalysisResultItem:
    """Analyze a single URL, reporting failure as a result item.

    Args:
        url: The URL to analyze
        pipeline: The pipeline to run
        semaphore: Semaphore for controlling concurrency

    Returns:
        AnalysisResultItem with success/error status
    """
    async with semaphore:
        try:
            analysis = await pipeline.analyze_link(url)
        except LinkAnalysisError as e:
            return AnalysisResultItem(
                url=url,
                success=False,
                data=None,
                error=str(e),
                error_type=type(e).__name__,
            )

        return AnalysisResultItem(url=url, success=True, data=analysis, error=None)


async def batch_analyze_links(
    urls: list[str],
    pipeline: LinkAnalysisPipeline,
    concurrency: int,
) -> BatchAnalysisResponse:
    """Analyze multiple URLs concurrently as independent pipeline runs.

    Args:
        urls: List of URLs to analyze
        pipeline: The pipeline to run
        concurrency: Maximum number of concurrent runs

    Returns:
        BatchAnalysisResponse with results for all URLs, in input order
    """
    semaphore = asyncio.Semaphore(max(1, concurrency))

    tasks = [analyze_single_url_safe(url, pipeline, semaphore) for url in urls]
    results = await asyncio.gather(*tasks)

    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    return BatchAnalysisResponse(
        total=len(results),
        successful=successful,
        failed=failed,
        results=results,
    )


def save_analysis_as_note(analysis: LinkAnalysis, store: NoteStore) -> Note:
    """Persist a LinkAnalysis as a note."""
    note = store.add_note(**note_fields_from_analysis(analysis))
    logger.info(f"Saved {analysis.url} as note {note.id}")
    return note
