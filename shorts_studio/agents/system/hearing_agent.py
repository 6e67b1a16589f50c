"""Hearing agent - asks the user one question at a time before a script is written"""

import logging
from typing import Sequence

from ...core.llm import HearingLLMClient
from ...core.state import HearingAIResponse, HearingMessage, HearingResponseType
from ...prompts import OPENING_QUESTION_TEMPLATE, FALLBACK_QUESTIONS, HEARING_COMPLETE_MESSAGE

logger = logging.getLogger(__name__)


class HearingAgent:
    """Drives the hearing dialogue through a hearing model

    The model decides whether to ask another question or declare the
    hearing complete. A question turn without content is replaced by a
    fixed question so the dialogue never stalls.
    """

    def __init__(self, llm_client: HearingLLMClient):
        self.llm_client = llm_client

    def generate_next_question(self, topic: str, history: Sequence[HearingMessage]) -> HearingAIResponse:
        """
        Produce the next hearing turn.

        Args:
            topic: What the short is about
            history: Conversation so far, oldest first

        Returns:
            HearingAIResponse of type question, complete or error
        """
        logger.info(f"[Hearing Agent] Next turn (topic={topic!r}, history={len(history)} message(s))")

        try:
            response = self.llm_client.ask(topic, history)
        except Exception as e:
            logger.error(f"[Hearing Agent] Hearing model raised {type(e).__name__}: {e}")
            return HearingAIResponse(type=HearingResponseType.ERROR, error=str(e) or type(e).__name__)

        if response.type == HearingResponseType.ERROR or response.error:
            logger.warning(f"[Hearing Agent] Hearing model error: {response.error}")
            return HearingAIResponse(type=HearingResponseType.ERROR, error=response.error or "Unknown error")

        if response.content:
            return HearingAIResponse(type=response.type, content=response.content)

        if response.type == HearingResponseType.COMPLETE:
            logger.info("[Hearing Agent] Completion without content, using fixed completion message")
            return HearingAIResponse(type=HearingResponseType.COMPLETE, content=HEARING_COMPLETE_MESSAGE)

        logger.info("[Hearing Agent] No content from hearing model, using fallback question")
        return HearingAIResponse(
            type=HearingResponseType.QUESTION,
            content=self._fallback_question(topic, history)
        )

    @staticmethod
    def _fallback_question(topic: str, history: Sequence[HearingMessage]) -> str:
        if not history:
            return OPENING_QUESTION_TEMPLATE.format(topic=topic)

        question_count = sum(1 for message in history if message.role == "assistant")
        return FALLBACK_QUESTIONS[question_count % len(FALLBACK_QUESTIONS)]
