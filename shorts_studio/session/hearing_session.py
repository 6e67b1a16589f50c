"""
Hearing session - gates script generation until the hearing is completed
"""

import logging
from typing import List, Optional, Sequence

from ..core.state import (
    CanGenerateResult,
    CtaPurpose,
    HearingBlockReason,
    HearingContext,
    HearingMessage,
    HearingState,
)

logger = logging.getLogger(__name__)


class HearingStateError(RuntimeError):
    """Raised when an operation is not allowed in the current hearing state"""


class HearingSession:
    """In-memory hearing session for one user interaction

    State only moves forward: not_started -> in_progress -> completed.
    Nothing is persisted; the server rebuilds a session from each request
    with from_request().
    """

    def __init__(self, topic: str = "", cta_purpose: CtaPurpose = CtaPurpose.LONG_VIDEO):
        self._state = HearingState.NOT_STARTED
        self.topic = topic
        self.cta_purpose = CtaPurpose(cta_purpose)
        self._history: List[HearingMessage] = []

    @classmethod
    def from_request(
        cls,
        topic: str,
        cta_purpose: CtaPurpose,
        history: Optional[Sequence[HearingMessage]] = None
    ) -> "HearingSession":
        """Rebuild a completed session from the topic, CTA purpose and transcript of a request"""
        session = cls(topic=topic, cta_purpose=cta_purpose)
        session.start()
        for message in history or []:
            session.add_message(message)
        session.complete()
        return session

    @property
    def state(self) -> HearingState:
        return self._state

    def set_topic(self, topic: str):
        self.topic = topic

    def set_cta_purpose(self, cta_purpose: CtaPurpose):
        self.cta_purpose = CtaPurpose(cta_purpose)

    def start(self):
        """Begin the hearing. Has no effect once started."""
        if self._state == HearingState.NOT_STARTED:
            self._state = HearingState.IN_PROGRESS
            logger.debug(f"[Hearing Session] Started (topic={self.topic!r})")

    def complete(self):
        """Finish the hearing. Has no effect when already completed.

        Raises:
            HearingStateError: If the hearing was never started
        """
        if self._state == HearingState.NOT_STARTED:
            raise HearingStateError("ヒアリングが開始されていません")
        if self._state == HearingState.IN_PROGRESS:
            self._state = HearingState.COMPLETED
            logger.debug(f"[Hearing Session] Completed with {len(self._history)} message(s)")

    def add_message(self, message: HearingMessage):
        # accepted in any state; the state gates generation, not the transcript
        self._history.append(message)

    def get_history(self) -> List[HearingMessage]:
        return list(self._history)

    def can_generate(self) -> CanGenerateResult:
        if self._state == HearingState.NOT_STARTED:
            return CanGenerateResult(allowed=False, reason=HearingBlockReason.HEARING_NOT_STARTED)
        if self._state == HearingState.IN_PROGRESS:
            return CanGenerateResult(allowed=False, reason=HearingBlockReason.HEARING_NOT_COMPLETED)
        return CanGenerateResult(allowed=True)

    def get_context_for_generation(self) -> HearingContext:
        """
        Snapshot the session for the script prompt.

        Returns:
            Frozen HearingContext with a deep copy of the transcript

        Raises:
            HearingStateError: If the hearing is not completed
        """
        if self._state != HearingState.COMPLETED:
            raise HearingStateError("ヒアリングが完了していません")

        return HearingContext(
            topic=self.topic,
            history=tuple(message.model_copy(deep=True) for message in self._history),
            cta_purpose=self.cta_purpose
        )
