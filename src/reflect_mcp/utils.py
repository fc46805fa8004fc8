"""Utility functions for HTML processing."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from reflect_mcp.errors import InsufficientContent, InvalidInput

# Upper bound on characters sent to the model
MAX_CONTENT_CHARS = 15000

# Below this the page has no meaningful prose (SPA shell, paywall, non-HTML)
MIN_CONTENT_CHARS = 50

NOISE_SELECTORS = [
    "script",
    "style",
    "noscript",
    "iframe",
    "svg",
    "header",
    "footer",
    "nav",
    "aside",
    ".ad",
    ".ads",
    ".cookie-banner",
]

# Meta tags reported alongside a run
METADATA_KEYS = ("description", "author", "og:title", "og:site_name", "og:type")

_WHITESPACE_RE = re.compile(r"\s+")


def extract_main_content(
    html: str,
    max_chars: int = MAX_CONTENT_CHARS,
    min_chars: int = MIN_CONTENT_CHARS,
) -> str:
    """Reduce raw HTML to a bounded plain-text payload.

    Noise subtrees (scripts, styles, frames, svg, landmarks, ads and cookie
    banners) are removed, whitespace is collapsed to single spaces and the
    result is hard-cut to ``max_chars``.

    Args:
        html: The HTML content to process
        max_chars: Maximum length of the returned text
        min_chars: Minimum length required to consider the page analyzable

    Returns:
        Cleaned plain text

    Raises:
        InsufficientContent: If the cleaned text is shorter than ``min_chars``
    """
    soup = BeautifulSoup(html, "lxml")

    for element in soup.select(", ".join(NOISE_SELECTORS)):
        # Already removed along with a noisy ancestor
        if element.decomposed:
            continue
        element.decompose()

    root = soup.body or soup
    text = _WHITESPACE_RE.sub(" ", root.get_text(separator=" ")).strip()
    text = text[:max_chars]

    if len(text) < min_chars:
        raise InsufficientContent(len(text), min_chars)

    return text


def extract_metadata(html: str) -> dict[str, str]:
    """Collect the page title and the descriptive meta tags in ``METADATA_KEYS``.

    Keys are lowercased; empty values are skipped.
    """
    soup = BeautifulSoup(html, "lxml")
    metadata: dict[str, str] = {}

    title = soup.title.get_text(strip=True) if soup.title else ""
    if title:
        metadata["title"] = title

    for meta in soup.find_all("meta", attrs={"content": True}):
        key = (meta.get("name") or meta.get("property") or "").lower()
        value = meta["content"].strip()
        if key in METADATA_KEYS and value:
            metadata[key] = value

    return metadata


def validate_url(url: str) -> str:
    """Check that ``url`` is an absolute http(s) URL with a host.

    Returns:
        The URL, unmodified

    Raises:
        InvalidInput: If the URL is empty, relative or not http(s)
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidInput(str(url), "URL is empty")
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidInput(url, str(e)) from e
    if parsed.scheme not in ("http", "https") or not hostname:
        raise InvalidInput(url)
    return url


def extract_domain(url: str) -> str:
    """Return the host component of an absolute URL.

    Raises:
        InvalidInput: If the URL has no host
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError as e:
        raise InvalidInput(url, str(e)) from e
    if not hostname:
        raise InvalidInput(url, "URL has no host")
    return hostname


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split())
