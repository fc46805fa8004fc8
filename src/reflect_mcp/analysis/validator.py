"""Validation and normalization of model replies into LinkAnalysis records."""

from __future__ import annotations

import json
import logging

from reflect_mcp.errors import MalformedModelOutput
from reflect_mcp.models.analysis import LinkAnalysis, ModelReply
from reflect_mcp.utils import count_words, extract_domain

logger = logging.getLogger(__name__)


def parse_reply(raw_reply: str) -> ModelReply:
    """Parse a raw reply into a per-field defaulted ModelReply.

    Raises:
        MalformedModelOutput: If the reply is not a JSON object
    """
    try:
        data = json.loads(raw_reply)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug(f"Unparseable model reply: {raw_reply!r}")
        raise MalformedModelOutput(raw_reply) from e

    if not isinstance(data, dict):
        raise MalformedModelOutput(raw_reply, f"AI returned {type(data).__name__} instead of a JSON object")

    return ModelReply.model_validate(data)


def normalize(raw_reply: str, original_url: str, clean_text: str) -> LinkAnalysis:
    """Assemble the final LinkAnalysis from a raw reply.

    ``word_count`` and ``domain`` are always computed locally; anything the
    model says about them is ignored.

    Args:
        raw_reply: The model's raw reply text
        original_url: The URL that was analyzed
        clean_text: The extracted text that was sent to the model

    Returns:
        A fully populated LinkAnalysis

    Raises:
        MalformedModelOutput: If the reply is not a JSON object
    """
    reply = parse_reply(raw_reply)

    return LinkAnalysis(
        url=original_url,
        domain=extract_domain(original_url),
        summary=reply.summary,
        keywords=reply.keywords,
        sentiment=reply.sentiment,
        word_count=count_words(clean_text),
        reading_time=reply.reading_time,
    )
