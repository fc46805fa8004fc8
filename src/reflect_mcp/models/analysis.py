"""Pydantic models for link analysis results."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Sentiment = Literal["Positive", "Neutral", "Negative"]

SENTIMENTS: tuple[str, ...] = ("Positive", "Neutral", "Negative")
DEFAULT_SUMMARY = "No summary available"
DEFAULT_SENTIMENT: Sentiment = "Neutral"


class LinkAnalysis(BaseModel):
    """Structured result of one pipeline run. Immutable once produced."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(description="The URL that was analyzed, unmodified")
    domain: str = Field(description="Host component of the URL")
    summary: str = Field(default=DEFAULT_SUMMARY, description="Short synthesized description")
    keywords: list[str] = Field(default_factory=list, description="Short topical tags")
    sentiment: Sentiment = Field(default=DEFAULT_SENTIMENT, description="Overall tone of the page")
    word_count: int = Field(ge=0, alias="wordCount", description="Whitespace-token count of the extracted text")
    reading_time: str | None = Field(default=None, alias="readingTime", description="Model's reading time estimate")


class ModelReply(BaseModel):
    """Partial view over a parsed model reply.

    Each field is optional and falls back to its default on a missing or
    mistyped value, so one bad field never rejects the whole reply.
    """

    model_config = ConfigDict(extra="ignore")

    summary: str = DEFAULT_SUMMARY
    keywords: list[str] = Field(default_factory=list)
    sentiment: Sentiment = DEFAULT_SENTIMENT
    reading_time: str | None = Field(default=None, alias="readingTime")

    @field_validator("summary", mode="before")
    @classmethod
    def _summary(cls, value: Any) -> str:
        if isinstance(value, str) and value.strip():
            return value
        return DEFAULT_SUMMARY

    @field_validator("keywords", mode="before")
    @classmethod
    def _keywords(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    @field_validator("sentiment", mode="before")
    @classmethod
    def _sentiment(cls, value: Any) -> str:
        return value if value in SENTIMENTS else DEFAULT_SENTIMENT

    @field_validator("reading_time", mode="before")
    @classmethod
    def _reading_time(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class AnalysisResultItem(BaseModel):
    """Individual result item for batch link analysis."""

    url: str = Field(description="The URL that was requested")
    success: bool = Field(description="Whether the analysis was successful")
    data: LinkAnalysis | None = Field(default=None, description="Analysis if successful")
    error: str | None = Field(default=None, description="Error message if failed")
    error_type: str | None = Field(default=None, description="Error kind if failed (e.g. FetchError)")


class BatchAnalysisResponse(BaseModel):
    """Response model for batch link analysis."""

    total: int = Field(description="Total number of URLs processed")
    successful: int = Field(description="Number of successful analyses")
    failed: int = Field(description="Number of failed analyses")
    results: list[AnalysisResultItem] = Field(description="Results for each URL")
