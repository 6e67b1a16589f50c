"""Prompt templates for the script studio agents

This module re-exports all prompts from their individual modules.
"""

# Script prompts
from .script import (
    SCRIPT_AGENT_PROMPT_TEMPLATE,
    HEARING_SCRIPT_PROMPT_TEMPLATE,
    CTA_KEYWORDS,
    CTA_INSTRUCTIONS,
    NoTranscriptError,
    build_script_prompt,
    build_hearing_script_prompt,
    format_hearing_info
)

# Hearing prompts
from .hearing import (
    HEARING_AGENT_PROMPT_TEMPLATE,
    OPENING_QUESTION_TEMPLATE,
    FALLBACK_QUESTIONS,
    HEARING_COMPLETE_MESSAGE,
    build_hearing_user_message
)

from .analysis import REFERENCE_ANALYSIS_PROMPT_TEMPLATE

# Import agent registry
from .registry import AGENT_REGISTRY

__all__ = [
    # Script
    'SCRIPT_AGENT_PROMPT_TEMPLATE',
    'HEARING_SCRIPT_PROMPT_TEMPLATE',
    'CTA_KEYWORDS',
    'CTA_INSTRUCTIONS',
    'NoTranscriptError',
    'build_script_prompt',
    'build_hearing_script_prompt',
    'format_hearing_info',
    # Hearing
    'HEARING_AGENT_PROMPT_TEMPLATE',
    'OPENING_QUESTION_TEMPLATE',
    'FALLBACK_QUESTIONS',
    'HEARING_COMPLETE_MESSAGE',
    'build_hearing_user_message',
    # Reference analysis
    'REFERENCE_ANALYSIS_PROMPT_TEMPLATE',
    # Registry
    'AGENT_REGISTRY'
]
