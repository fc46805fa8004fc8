"""Content providers for fetching remote pages."""

from reflect_mcp.providers.base import ContentProvider, FetchResult
from reflect_mcp.providers.requests_provider import RequestsProvider

__all__ = ["ContentProvider", "FetchResult", "RequestsProvider"]
