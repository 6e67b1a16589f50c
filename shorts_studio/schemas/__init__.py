"""
Schema registry for structured output.
Auto-selects Gemini or GPT schemas based on model type.
"""

import importlib
from typing import Dict, Any


# Available schemas - agents reference them by name
AVAILABLE_SCHEMAS = [
    "script_agent",
    "hearing_agent",
    "reference_analyzer"
]


def get_schema(agent_name: str, model_type: str) -> Dict[str, Any]:
    """
    Load the appropriate schema for an agent based on model type.

    Args:
        agent_name: Name of the agent (e.g., "script_agent", "hearing_agent")
        model_type: Model type ("gemini" or "gpt")

    Returns:
        Schema dictionary compatible with the specified model

    Raises:
        ValueError: If agent_name or model_type is invalid
    """
    if model_type not in ["gemini", "gpt"]:
        raise ValueError(f"Invalid model_type: {model_type}. Must be 'gemini' or 'gpt'.")

    if agent_name not in AVAILABLE_SCHEMAS:
        raise ValueError(f"Invalid agent_name: {agent_name}. Must be one of {AVAILABLE_SCHEMAS}")

    module = importlib.import_module(f"{__name__}.{agent_name}")

    if model_type == "gemini":
        return module.GEMINI_SCHEMA
    return module.GPT_SCHEMA
