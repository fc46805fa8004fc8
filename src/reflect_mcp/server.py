"""MCP server exposing link analysis and note tools."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from reflect_mcp.config import get_config, get_current_config, load_config
from reflect_mcp.core import AppContext, build_app_context
from reflect_mcp.logging_config import configure_logging
from reflect_mcp.tools import ReflectTools, register_analysis_tools, register_note_tools

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "A personal knowledge base MCP server. Analyze web links into summaries, "
    "keywords and sentiment with AI, save them as notes, manage notes, and ask "
    "questions about your notes."
)


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint for container orchestration.

    Returns:
        JSONResponse with status: healthy
    """
    return JSONResponse({"status": "healthy"})


async def api_config_get(request: Request) -> JSONResponse:
    """Get current runtime configuration (API key redacted).

    Returns:
        JSONResponse with current config values
    """
    return JSONResponse(get_current_config())


def create_server(context: AppContext) -> FastMCP:
    """Create the MCP server and register all tools and routes.

    Args:
        context: Collaborators the tools operate on

    Returns:
        Configured FastMCP instance
    """
    # Stateless mode auto-creates sessions for unknown session IDs
    mcp = FastMCP("Reflect MCP", instructions=INSTRUCTIONS, stateless_http=True)

    tools = ReflectTools(context)
    register_analysis_tools(mcp, tools)
    register_note_tools(mcp, tools)

    mcp.custom_route("/healthz", methods=["GET"])(health_check)
    mcp.custom_route("/api/config", methods=["GET"])(api_config_get)

    return mcp


def run_server(transport: str = "streamable-http", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('streamable-http', 'sse' or 'stdio')
        host: Host to bind to (default: 0.0.0.0)
        port: Port to bind to (default: 8000)
    """
    load_config()
    configure_logging(get_config("log_level"))

    mcp = create_server(build_app_context())

    mcp.settings.host = host
    mcp.settings.port = port

    logger.info(f"Starting Reflect MCP with {transport} transport")
    mcp.run(transport=transport)
