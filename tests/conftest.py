"""Pytest configuration and fixtures for reflect-mcp tests."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from reflect_mcp.analysis import AnalysisRequester
from reflect_mcp.pipeline import LinkAnalysisPipeline
from reflect_mcp.providers import FetchResult

ARTICLE_WORDS = 600


@pytest.fixture
def article_text() -> str:
    """Six hundred words of article prose."""
    return " ".join(f"lorem{i % 50}" for i in range(ARTICLE_WORDS))


@pytest.fixture
def article_html(article_text: str) -> str:
    """Article page wrapped in navigation and other noise."""
    return f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <title>News Article</title>
        <meta name="description" content="An article about X">
        <style>.test {{ color: red; }}</style>
        <script>console.log('should be stripped');</script>
    </head>
    <body>
        <nav><a href="/">Home</a> <a href="/world">World</a></nav>
        <article>{article_text}</article>
    </body>
    </html>
    """


@pytest.fixture
def noisy_html() -> str:
    """HTML with every kind of noise the extractor removes."""
    return """
    <html>
    <head><title>Noisy Page</title></head>
    <body>
        <header>Site Header</header>
        <nav>Navigation Links</nav>
        <script>var tracking = true;</script>
        <style>body { margin: 0; }</style>
        <noscript>Enable JavaScript</noscript>
        <iframe src="https://ads.example.com"></iframe>
        <svg><text>Vector Label</text></svg>
        <aside>Related Stories</aside>
        <div class="ad">Buy Now</div>
        <div class="ads">Sponsored Content</div>
        <div class="cookie-banner">We use cookies</div>
        <main>
            <h1>Main Heading</h1>
            <p>This is the   actual
               article body with <strong>real</strong> prose worth reading.</p>
        </main>
        <footer>Copyright Footer</footer>
    </body>
    </html>
    """


@pytest.fixture
def short_html() -> str:
    """HTML whose readable text is 30 characters long."""
    return "<html><body><nav>Menu</nav><p>Only thirty characters here!!!</p></body></html>"


@pytest.fixture
def model_reply() -> str:
    """Well-formed model reply."""
    return json.dumps(
        {
            "summary": "A brief article about X.",
            "keywords": ["x", "y"],
            "sentiment": "Positive",
            "readingTime": "3 min read",
        }
    )


@pytest.fixture
def stub_model(model_reply: str) -> AsyncMock:
    """Model stub whose generate() returns the well-formed reply."""
    model = AsyncMock()
    model.generate = AsyncMock(return_value=model_reply)
    return model


@pytest.fixture
def stub_provider(article_html: str) -> AsyncMock:
    """Provider stub returning the article page."""
    provider = AsyncMock()
    provider.fetch = AsyncMock(
        return_value=FetchResult(
            url="https://news.example/article",
            content=article_html,
            status_code=200,
            content_type="text/html; charset=utf-8",
            metadata={"elapsed_ms": 12.5, "attempts": 1, "retries": 0},
        )
    )
    return provider


@pytest.fixture
def pipeline(stub_provider: AsyncMock, stub_model: AsyncMock) -> LinkAnalysisPipeline:
    """Pipeline wired to the provider and model stubs."""
    return LinkAnalysisPipeline(stub_provider, AnalysisRequester(stub_model, timeout=5))
