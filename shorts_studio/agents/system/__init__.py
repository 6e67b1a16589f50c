"""System agents for the hearing dialogue"""

from .hearing_agent import HearingAgent

__all__ = [
    'HearingAgent'
]
