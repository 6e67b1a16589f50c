"""Script generation agents"""

# Import agents
from .agent_script import ScriptGenerator

# Import tools
from .tools_script_validation import validate_script
from .tools_retry import determine_retry_action, adjust_prompt, can_retry

__all__ = [
    # Agents
    'ScriptGenerator',
    # Tools
    'validate_script',
    'determine_retry_action',
    'adjust_prompt',
    'can_retry',
]
