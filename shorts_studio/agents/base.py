"""
Shared helpers for the script studio agents
"""

import json
import re
import logging

logger = logging.getLogger(__name__)

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def extract_json(response_text: str) -> str:
    """
    Pull the JSON payload out of raw model output.

    Models sometimes wrap JSON in ```json ... ``` blocks or surround it with
    prose. Candidates are tried in this order:
      1. the contents of the first fenced code block
      2. everything from the first "{" to the last "}"
      3. the whole text, trimmed

    Args:
        response_text: Raw text returned by the model

    Returns:
        Text ready for json.loads (not guaranteed to be valid JSON)
    """
    match = _FENCED_BLOCK.search(response_text)
    if match:
        return match.group(1).strip()

    start = response_text.find("{")
    end = response_text.rfind("}")
    if start != -1 and end > start:
        return response_text[start:end + 1]

    return response_text.strip()


def format_attempt(attempt: int, max_attempts: int) -> str:
    """Format attempt counter for log lines"""
    return f"{attempt}/{max_attempts}"


def parse_json_response(response_text: str):
    """Parse model output as JSON after extraction; None when it is not valid JSON"""
    try:
        return json.loads(extract_json(response_text))
    except ValueError as e:
        logger.debug(f"[JSON] Could not parse model output: {e}")
        return None
