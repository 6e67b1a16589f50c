"""Agent registry descriptions"""

# Agent registry for active agents in the system
AGENT_REGISTRY = {
    "script_agent": {
        "description": "Writes a 250-400 character YouTube Shorts script (hook/body/cta plus optional context/proof/transition) as JSON",
        "capabilities": ["script_creation", "cta_alignment", "length_control"],
        "system_prompt": "You are a YouTube Shorts script writer. Reply with a single JSON object and nothing else. Never use emoji."
    },
    "hearing_agent": {
        "description": "Interviews the user one question at a time until there is enough material for a script",
        "capabilities": ["question_generation", "sufficiency_judgement"],
        "system_prompt": None  # full system prompt lives in prompts.hearing
    },
    "reference_analyzer": {
        "description": "Infers hook style, tone and structure of a reference video from its metadata",
        "capabilities": ["reference_analysis"],
        "system_prompt": "You analyze short-form video references. Reply with a single JSON object and nothing else."
    }
}
