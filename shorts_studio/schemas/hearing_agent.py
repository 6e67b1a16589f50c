"""
Schema definitions for hearing_agent.
Supports both Gemini and GPT structured output.
"""

GEMINI_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "type": {"type": "STRING", "enum": ["question", "complete"]},
        "content": {"type": "STRING"}
    },
    "required": ["type", "content"]
}

GPT_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": ["question", "complete"]},
        "content": {"type": "string"}
    },
    "required": ["type", "content"],
    "additionalProperties": False
}
