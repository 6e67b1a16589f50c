"""
Schema definitions for reference_analyzer.
Supports both Gemini and GPT structured output.
"""

GEMINI_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "hookStyle": {"type": "STRING"},
        "tone": {"type": "STRING"},
        "structure": {"type": "STRING"}
    },
    "required": ["hookStyle", "tone", "structure"]
}

GPT_SCHEMA = {
    "type": "object",
    "properties": {
        "hookStyle": {"type": "string"},
        "tone": {"type": "string"},
        "structure": {"type": "string"}
    },
    "required": ["hookStyle", "tone", "structure"],
    "additionalProperties": False
}
