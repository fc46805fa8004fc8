"""Base provider interface for fetching page content."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FetchResult:
    """Result from a page fetch."""

    url: str
    content: str
    status_code: int
    content_type: str | None
    metadata: dict[str, Any] = field(default_factory=dict)


class ContentProvider(ABC):
    """Abstract base class for content providers."""

    @abstractmethod
    async def fetch(self, url: str, **kwargs: Any) -> FetchResult:
        """Fetch raw markup from a URL.

        Args:
            url: The URL to fetch
            **kwargs: Additional provider-specific options

        Returns:
            FetchResult containing the response body and metadata

        Raises:
            InvalidInput: If the URL is not supported
            NetworkError: If the target cannot be reached
            FetchError: If the target responds with a non-success status
        """
        pass

    @abstractmethod
    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if this provider can handle the URL
        """
        pass
