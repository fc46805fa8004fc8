"""Reflect MCP: AI link analysis and notes for a personal knowledge base."""

__version__ = "0.1.0"
