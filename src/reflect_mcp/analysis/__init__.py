"""Model-facing stages of the link analysis pipeline.

- requester: prompt construction and the generative model call
- validator: JSON parsing, per-field defaults, LinkAnalysis assembly
- assistant: free-text question answering over notes
"""

from reflect_mcp.analysis.assistant import NotesAssistant
from reflect_mcp.analysis.requester import AnalysisModel, AnalysisRequester, GeminiModel
from reflect_mcp.analysis.validator import normalize, parse_reply

__all__ = [
    "AnalysisModel",
    "AnalysisRequester",
    "GeminiModel",
    "NotesAssistant",
    "normalize",
    "parse_reply",
]
