"""
Script generation agent for YouTube Shorts
"""

import logging
import time
from typing import List

from ...core.llm import ScriptLLMClient
from ...core.state import (
    GenerationResult,
    HearingContext,
    RetryAction,
    ScriptGenerationRequest,
)
from ...core.config import MAX_GENERATION_ATTEMPTS
from ...prompts import build_script_prompt, build_hearing_script_prompt
from ..base import format_attempt
from .tools_script_validation import validate_script
from .tools_retry import determine_retry_action, adjust_prompt, can_retry

logger = logging.getLogger(__name__)

RETRY_LIMIT_MESSAGE = "リトライ回数の上限に達しました。再度お試しください。"
GENERATION_FAILED_MESSAGE = "台本の生成に失敗しました"


class ScriptGenerator:
    """Generate a script, validate it and re-prompt until it passes or retries run out

    The script model is never trusted: every candidate goes through the
    validator, and only a candidate with zero issues is returned.
    """

    def __init__(self, llm_client: ScriptLLMClient):
        self.llm_client = llm_client
        # Diagnostics for the most recent generate() call
        self.attempts = 0
        self.prompts: List[str] = []

    def generate(self, request: ScriptGenerationRequest) -> GenerationResult:
        """Run the generate/validate/retry loop for one request

        Args:
            request: Topic, CTA purpose and optional hearing history

        Returns:
            GenerationResult with a valid script, validation errors
            (optionally flagged needs_more_info), or an llm_error
        """
        start_time = time.time()
        self.attempts = 0
        self.prompts = []

        prompt = self._build_prompt(request)
        logger.info(f"[Script Generator] Starting generation (topic={request.topic!r}, cta={request.cta_purpose.value})")

        while can_retry(self.attempts):
            self.attempts += 1
            self.prompts.append(prompt)
            logger.info(f"[Script Generator] Attempt {format_attempt(self.attempts, MAX_GENERATION_ATTEMPTS)}")

            try:
                llm_response = self.llm_client.generate_script(prompt)
            except Exception as e:
                logger.error(f"[Script Generator] Script model raised {type(e).__name__}: {e}")
                return GenerationResult(success=False, llm_error=str(e) or GENERATION_FAILED_MESSAGE)

            if llm_response.error or llm_response.script is None:
                logger.warning(f"[Script Generator] Script model error: {llm_response.error}")
                return GenerationResult(
                    success=False,
                    llm_error=llm_response.error or GENERATION_FAILED_MESSAGE
                )

            script = llm_response.script
            validation = validate_script(script, request.cta_purpose)

            if validation.valid:
                logger.info(f"[Script Generator] ✓ Valid script ({script.total_length()} chars) "
                            f"after {self.attempts} attempt(s) in {time.time() - start_time:.2f}s")
                return GenerationResult(success=True, script=script)

            current_length = script.total_length()
            codes = [error.code.value for error in validation.errors]
            logger.info(f"[Script Generator] Validation failed ({current_length} chars): {codes}")

            decision = determine_retry_action(validation.errors, current_length)
            logger.info(f"[Script Generator] Retry decision: {decision.action.value}")

            if decision.action == RetryAction.REQUEST_MORE_INFO:
                return GenerationResult(success=False, errors=validation.errors, needs_more_info=True)

            if decision.action == RetryAction.RETRY_WITH_PROMPT and can_retry(self.attempts):
                # Corrections stack on the prompt of the attempt that just failed
                prompt = adjust_prompt(prompt, validation.errors, current_length)
                continue

            return GenerationResult(success=False, errors=validation.errors)

        logger.warning(f"[Script Generator] Retry limit reached after {self.attempts} attempt(s)")
        return GenerationResult(success=False, llm_error=RETRY_LIMIT_MESSAGE)

    def _build_prompt(self, request: ScriptGenerationRequest) -> str:
        if request.history:
            context = HearingContext(
                topic=request.topic,
                history=tuple(request.history),
                cta_purpose=request.cta_purpose
            )
            return build_hearing_script_prompt(context)
        return build_script_prompt(request.topic, request.cta_purpose)
