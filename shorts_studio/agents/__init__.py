"""Agent implementations for the Shorts script workflow"""

# Import base utilities
from .base import extract_json, parse_json_response

# Import creative agents
from .creative.agent_script import ScriptGenerator
from .creative.tools_script_validation import validate_script
from .creative.tools_retry import determine_retry_action, adjust_prompt, can_retry

# Import system agents
from .system.hearing_agent import HearingAgent

# Import reference agents
from .reference.video_analyzer import VideoAnalyzer


__all__ = [
    # Utility functions
    'extract_json',
    'parse_json_response',
    # Creative agents
    'ScriptGenerator',
    'validate_script',
    'determine_retry_action',
    'adjust_prompt',
    'can_retry',
    # System agents
    'HearingAgent',
    # Reference agents
    'VideoAnalyzer'
]
