"""State and domain types for the script generation workflow"""

from enum import Enum
from typing import Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CtaPurpose(str, Enum):
    """What the closing call-to-action asks the viewer to do"""
    LONG_VIDEO = "longVideo"
    LIKE = "like"
    COMMENT = "comment"


class ValidationErrorCode(str, Enum):
    MISSING_HOOK = "MISSING_HOOK"
    MISSING_BODY = "MISSING_BODY"
    MISSING_CTA = "MISSING_CTA"
    INVALID_ORDER = "INVALID_ORDER"
    CONTAINS_EMOJI = "CONTAINS_EMOJI"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    CTA_MISMATCH_LONG_VIDEO = "CTA_MISMATCH_LONG_VIDEO"
    CTA_MISMATCH_LIKE = "CTA_MISMATCH_LIKE"
    CTA_MISMATCH_COMMENT = "CTA_MISMATCH_COMMENT"


class RetryAction(str, Enum):
    RETRY_WITH_PROMPT = "retry_with_prompt"
    REQUEST_MORE_INFO = "request_more_info"
    NO_RETRY = "no_retry"


class HearingState(str, Enum):
    """Hearing lifecycle. Transitions only ever move forward."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class HearingBlockReason(str, Enum):
    HEARING_NOT_STARTED = "HEARING_NOT_STARTED"
    HEARING_NOT_COMPLETED = "HEARING_NOT_COMPLETED"


class HearingResponseType(str, Enum):
    QUESTION = "question"
    COMPLETE = "complete"
    ERROR = "error"


class ApiModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Script segments in reading order. Optional ones may be absent.
SCRIPT_SEGMENT_ORDER = ("hook", "context", "body", "proof", "transition", "cta")
REQUIRED_SCRIPT_FIELDS = ("hook", "body", "cta")


class Script(ApiModel):
    """One generated short-video script (a candidate until it validates)"""
    model_config = ConfigDict(frozen=True)

    hook: str = ""  # opening line, required
    context: Optional[str] = None  # who it is for / situation
    body: str = ""  # main value, required
    proof: Optional[str] = None  # reasons, examples, evidence
    transition: Optional[str] = None  # pivot or emphasis
    cta: str = ""  # call-to-action, required

    def segments(self) -> Iterator[str]:
        """Yield present segments in reading order; absent or empty ones are skipped"""
        for name in SCRIPT_SEGMENT_ORDER:
            value = getattr(self, name)
            if value:
                yield value

    def full_text(self) -> str:
        return "".join(self.segments())

    def total_length(self) -> int:
        return sum(len(segment) for segment in self.segments())


class ValidationIssue(ApiModel):
    code: ValidationErrorCode
    message: str


class ValidationResult(ApiModel):
    valid: bool
    errors: List[ValidationIssue]


class RetryDecision(ApiModel):
    action: RetryAction
    shortfall: Optional[int] = None  # characters below SCRIPT_MIN_LENGTH
    excess: Optional[int] = None  # characters above SCRIPT_MAX_LENGTH


class HearingMessage(ApiModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["assistant", "user"]
    content: str


class HearingContext(ApiModel):
    """Snapshot of a completed hearing, handed to the script prompt"""
    model_config = ConfigDict(frozen=True)

    topic: str
    history: Tuple[HearingMessage, ...]
    cta_purpose: CtaPurpose


class CanGenerateResult(ApiModel):
    allowed: bool
    reason: Optional[HearingBlockReason] = None


class HearingAIResponse(ApiModel):
    type: HearingResponseType
    content: Optional[str] = None
    error: Optional[str] = None


class LLMResponse(ApiModel):
    """What a script oracle returns for one prompt"""
    script: Optional[Script] = None
    error: Optional[str] = None
    raw_output: str = ""  # kept for diagnostics in every case


class ScriptGenerationRequest(ApiModel):
    topic: str
    cta_purpose: CtaPurpose
    history: Optional[List[HearingMessage]] = None


class GenerationResult(ApiModel):
    success: bool
    script: Optional[Script] = None
    errors: Optional[List[ValidationIssue]] = None
    llm_error: Optional[str] = None
    needs_more_info: Optional[bool] = None

    @model_validator(mode="after")
    def _script_excludes_errors(self):
        if self.script is not None and (self.errors is not None or self.llm_error is not None):
            raise ValueError("a generation result carries either a script or errors, never both")
        if self.errors is not None and self.llm_error is not None:
            raise ValueError("validation errors and llm_error are separate channels")
        return self


# Reference video analysis

class VideoInfo(ApiModel):
    title: str
    description: str = ""
    channel_title: str = ""
    captions: Optional[str] = None


class VideoAnalysis(ApiModel):
    hook_style: str  # e.g. shock, question, numbers
    tone: str  # e.g. casual, formal, emotional
    structure: str  # e.g. story, list, comparison


class YouTubeUrlValidationResult(ApiModel):
    valid: bool
    video_id: Optional[str] = None
    error: Optional[Literal["INVALID_URL", "NOT_YOUTUBE"]] = None


class YouTubeAnalyzeResult(ApiModel):
    success: bool
    video_info: Optional[VideoInfo] = None
    analysis: Optional[VideoAnalysis] = None
    error: Optional[str] = None
