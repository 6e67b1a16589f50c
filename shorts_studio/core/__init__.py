"""Core system components"""

from .state import Script, CtaPurpose, GenerationResult, HearingState
from .config import *
# LLM adapters are imported from .llm directly to keep this package light

__all__ = ['Script', 'CtaPurpose', 'GenerationResult', 'HearingState']
