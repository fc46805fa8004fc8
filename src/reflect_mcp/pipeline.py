"""Link analysis pipeline: fetch, extract, request, validate."""

from __future__ import annotations

import logging
from enum import Enum

from reflect_mcp.analysis.requester import AnalysisRequester
from reflect_mcp.analysis.validator import normalize
from reflect_mcp.errors import LinkAnalysisError
from reflect_mcp.models.analysis import LinkAnalysis
from reflect_mcp.providers import ContentProvider
from reflect_mcp.utils import (
    MAX_CONTENT_CHARS,
    MIN_CONTENT_CHARS,
    extract_main_content,
    extract_metadata,
    validate_url,
)

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    """States of a single pipeline run."""

    IDLE = "idle"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    REQUESTING = "requesting"
    VALIDATING = "validating"
    DONE = "done"
    FAILED = "failed"


class LinkAnalysisPipeline:
    """Runs fetch -> extract -> request -> validate for one URL at a time.

    Holds only its collaborators, so concurrent runs share nothing. Stage
    errors reach the caller unmodified; nothing is persisted.
    """

    def __init__(
        self,
        provider: ContentProvider,
        requester: AnalysisRequester,
        max_chars: int = MAX_CONTENT_CHARS,
        min_chars: int = MIN_CONTENT_CHARS,
    ) -> None:
        self.provider = provider
        self.requester = requester
        self.max_chars = max_chars
        self.min_chars = min_chars

    async def analyze_link(self, url: str) -> LinkAnalysis:
        """Analyze a single URL.

        Args:
            url: Absolute http(s) URL to analyze

        Returns:
            The validated LinkAnalysis

        Raises:
            InvalidInput: If the URL is malformed or empty
            NetworkError: If the page cannot be reached
            FetchError: If the page responds with a non-success status
            InsufficientContent: If too little text could be extracted
            ModelUnavailable: If the model call fails
            MalformedModelOutput: If the model reply is not a JSON object
        """
        stage = PipelineStage.IDLE
        try:
            validate_url(url)

            stage = PipelineStage.FETCHING
            logger.debug(f"[{stage.value}] {url}")
            fetched = await self.provider.fetch(url)

            stage = PipelineStage.EXTRACTING
            logger.debug(f"[{stage.value}] {url} ({len(fetched.content)} bytes of markup)")
            if logger.isEnabledFor(logging.DEBUG):
                page = extract_metadata(fetched.content)
                logger.debug(f"[{stage.value}] {url} title={page.get('title', '')!r} meta={sorted(page)}")
            clean_text = extract_main_content(fetched.content, self.max_chars, self.min_chars)

            stage = PipelineStage.REQUESTING
            logger.debug(f"[{stage.value}] {url} ({len(clean_text)} characters of text)")
            raw_reply = await self.requester.request_analysis(clean_text, url)

            stage = PipelineStage.VALIDATING
            logger.debug(f"[{stage.value}] {url}")
            analysis = normalize(raw_reply, url, clean_text)
        except LinkAnalysisError as e:
            logger.warning(f"Link analysis failed while {stage.value} {url}: {type(e).__name__}: {e}")
            raise

        logger.info(f"Analyzed {url}: {analysis.word_count} words, sentiment {analysis.sentiment}")
        return analysis
