"""Generative model access for link analysis."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from google import genai
from google.genai import types

from reflect_mcp.analysis.prompts import build_analysis_prompt
from reflect_mcp.config import DEFAULT_MODEL
from reflect_mcp.errors import ModelUnavailable

logger = logging.getLogger(__name__)


class AnalysisModel(Protocol):
    """A single-turn text completion backend."""

    async def generate(self, prompt: str, json_output: bool = False) -> str:
        """Send one prompt and return the reply text.

        Raises:
            ModelUnavailable: If the provider call fails
        """
        ...


class GeminiModel:
    """Gemini backend over an injected ``google.genai`` client.

    A missing client (no API key configured) only fails when the model is
    first used.
    """

    def __init__(self, client: genai.Client | None, model: str = DEFAULT_MODEL) -> None:
        self.client = client
        self.model = model

    async def generate(self, prompt: str, json_output: bool = False) -> str:
        if self.client is None:
            raise ModelUnavailable("Gemini API key is not configured (set GEMINI_API_KEY)")

        config = types.GenerateContentConfig(response_mime_type="application/json") if json_output else None

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            raise ModelUnavailable(f"Gemini call failed: {type(e).__name__}: {e}") from e

        # Blocked or empty candidates yield no text
        return response.text or ""


class AnalysisRequester:
    """Builds the analysis prompt and obtains the model's raw reply."""

    def __init__(
        self,
        model: AnalysisModel,
        timeout: float | None = 60,
        max_retries: int = 0,
        retry_delay: float = 1.0,
    ) -> None:
        """Initialize the requester.

        Args:
            model: Backend used for completions
            timeout: Deadline per model call in seconds, None for no deadline
            max_retries: Retry attempts on ModelUnavailable (default: 0)
            retry_delay: Initial delay between retries in seconds
        """
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    async def request_analysis(self, clean_text: str, source_url: str) -> str:
        """Ask the model for a JSON analysis of ``clean_text``.

        Args:
            clean_text: Extracted page text
            source_url: URL the text came from, used for logging

        Returns:
            The model's raw reply text

        Raises:
            ModelUnavailable: If the call fails or exceeds the deadline
        """
        prompt = build_analysis_prompt(clean_text)

        attempt = 0
        while True:
            try:
                return await self._generate(prompt)
            except ModelUnavailable:
                attempt += 1
                if attempt > self.max_retries:
                    raise

                delay = self.retry_delay * (2 ** (attempt - 1))
                logger.debug(
                    f"Model retry attempt {attempt}/{self.max_retries} for {source_url} after {delay:.2f}s delay"
                )
                await asyncio.sleep(delay)

    async def _generate(self, prompt: str) -> str:
        try:
            return await asyncio.wait_for(self.model.generate(prompt, json_output=True), timeout=self.timeout)
        except TimeoutError as e:
            raise ModelUnavailable(f"Model call exceeded {self.timeout}s deadline") from e
