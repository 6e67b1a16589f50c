"""Type definitions for API request/response validation"""

from pydantic import Field
from typing import Optional, List

from ..core.state import ApiModel, HearingMessage

# Fields the handlers check themselves are Optional so a bad value yields the
# endpoint's own 400 body instead of a generic 422.


class GenerateRequest(ApiModel):
    """Request type for script generation"""
    topic: Optional[str] = None
    cta_purpose: Optional[str] = None
    history: Optional[List[HearingMessage]] = None


class HearingRequest(ApiModel):
    """Request type for one hearing turn"""
    topic: Optional[str] = None
    history: List[HearingMessage] = Field(default_factory=list)


class YouTubeAnalyzeRequest(ApiModel):
    """Request type for reference video analysis"""
    url: Optional[str] = None
