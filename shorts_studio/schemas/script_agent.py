"""
Schema definitions for script_agent.
Supports both Gemini and GPT structured output.

Key difference: Gemini includes propertyOrdering (non-standard),
GPT has strict additionalProperties: false. Optional segments stay out of
"required" in both so the model can omit them instead of emitting "".
"""

GEMINI_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "hook": {"type": "STRING"},
        "context": {"type": "STRING"},
        "body": {"type": "STRING"},
        "proof": {"type": "STRING"},
        "transition": {"type": "STRING"},
        "cta": {"type": "STRING"}
    },
    "required": ["hook", "body", "cta"],
    "propertyOrdering": ["hook", "context", "body", "proof", "transition", "cta"]
}

GPT_SCHEMA = {
    "type": "object",
    "properties": {
        "hook": {"type": "string"},
        "context": {"type": "string"},
        "body": {"type": "string"},
        "proof": {"type": "string"},
        "transition": {"type": "string"},
        "cta": {"type": "string"}
    },
    "required": ["hook", "body", "cta"],
    "additionalProperties": False
}
