"""Hearing session state"""

from .hearing_session import HearingSession, HearingStateError

__all__ = ['HearingSession', 'HearingStateError']
