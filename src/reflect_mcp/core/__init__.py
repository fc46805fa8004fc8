"""Core infrastructure: wiring of the pipeline, note store and assistant.

The core module builds the single AppContext the server entry point owns
and passes to the tool layer.
"""

from reflect_mcp.core.context import AppContext, build_app_context, create_genai_client

__all__ = [
    "AppContext",
    "build_app_context",
    "create_genai_client",
]
