"""
Retry planning tools for script generation
Decides how to react to validation issues and rewrites the prompt for the next attempt
"""

from typing import List

from ...core.config import (
    SCRIPT_MIN_LENGTH,
    SCRIPT_MAX_LENGTH,
    MAX_GENERATION_ATTEMPTS,
    SHORTFALL_THRESHOLD_FOR_RETRY,
    EXCESS_THRESHOLD_FOR_RETRY,
)
from ...core.state import (
    CtaPurpose,
    RetryAction,
    RetryDecision,
    ValidationErrorCode,
    ValidationIssue,
)
from ...prompts import CTA_KEYWORDS


# Issues a reworded prompt can fix on its own
RETRYABLE_CODES = {
    ValidationErrorCode.CONTAINS_EMOJI,
    ValidationErrorCode.CTA_MISMATCH_LONG_VIDEO,
    ValidationErrorCode.CTA_MISMATCH_LIKE,
    ValidationErrorCode.CTA_MISMATCH_COMMENT,
    ValidationErrorCode.MISSING_HOOK,
    ValidationErrorCode.MISSING_BODY,
    ValidationErrorCode.MISSING_CTA,
    ValidationErrorCode.INVALID_ORDER,
}

CORRECTION_SECTION_HEADER = "\n\n---\n## 修正指示\n"


def determine_retry_action(errors: List[ValidationIssue], current_length: int) -> RetryDecision:
    """
    Choose the reaction to a failed validation.

    Priority:
      1. TOO_SHORT: retry when the shortfall is within the threshold, else ask for more info
      2. TOO_LONG: same rule on the excess
      3. any other retryable issue: retry with an adjusted prompt
      4. otherwise no retry

    Args:
        errors: Issues reported by the validator
        current_length: Measured length of the rejected candidate

    Returns:
        RetryDecision carrying shortfall or excess when length drove the decision
    """
    codes = {error.code for error in errors}

    if ValidationErrorCode.TOO_SHORT in codes:
        shortfall = SCRIPT_MIN_LENGTH - current_length
        if shortfall <= SHORTFALL_THRESHOLD_FOR_RETRY:
            return RetryDecision(action=RetryAction.RETRY_WITH_PROMPT, shortfall=shortfall)
        return RetryDecision(action=RetryAction.REQUEST_MORE_INFO, shortfall=shortfall)

    if ValidationErrorCode.TOO_LONG in codes:
        excess = current_length - SCRIPT_MAX_LENGTH
        if excess <= EXCESS_THRESHOLD_FOR_RETRY:
            return RetryDecision(action=RetryAction.RETRY_WITH_PROMPT, excess=excess)
        return RetryDecision(action=RetryAction.REQUEST_MORE_INFO, excess=excess)

    if codes & RETRYABLE_CODES:
        return RetryDecision(action=RetryAction.RETRY_WITH_PROMPT)

    return RetryDecision(action=RetryAction.NO_RETRY)


def can_retry(attempt: int) -> bool:
    """Whether another attempt is allowed after `attempt` attempts"""
    return attempt < MAX_GENERATION_ATTEMPTS


def _keyword_list(cta_purpose: CtaPurpose) -> str:
    return "".join(f"「{keyword}」" for keyword in CTA_KEYWORDS[cta_purpose])


def _directive_for(code: ValidationErrorCode, current_length: int):
    """Corrective line for one issue code, or None when there is nothing to say"""
    if code == ValidationErrorCode.TOO_SHORT:
        shortfall = SCRIPT_MIN_LENGTH - current_length
        return (
            f"【重要】前回の台本は{shortfall}文字ほど短すぎました。"
            f"もう少し詳しく説明を追加して、全体で{SCRIPT_MIN_LENGTH}〜{SCRIPT_MAX_LENGTH}文字になるように長くしてください。"
        )
    if code == ValidationErrorCode.TOO_LONG:
        excess = current_length - SCRIPT_MAX_LENGTH
        return (
            f"【重要】前回の台本は{excess}文字ほど長すぎました。"
            f"内容を簡潔にまとめて、全体で{SCRIPT_MIN_LENGTH}〜{SCRIPT_MAX_LENGTH}文字になるように短くしてください。"
        )
    if code == ValidationErrorCode.CONTAINS_EMOJI:
        return "【重要】絵文字は絶対に使用しないでください。絵文字を含めないでください。"
    if code == ValidationErrorCode.CTA_MISMATCH_LONG_VIDEO:
        return f"【重要】CTAには必ず{_keyword_list(CtaPurpose.LONG_VIDEO)}のいずれかのワードを含めてください。"
    if code == ValidationErrorCode.CTA_MISMATCH_LIKE:
        return f"【重要】CTAには必ず{_keyword_list(CtaPurpose.LIKE)}のいずれかのワードを含めてください。"
    if code == ValidationErrorCode.CTA_MISMATCH_COMMENT:
        return f"【重要】CTAには必ず{_keyword_list(CtaPurpose.COMMENT)}のいずれかのワードを含めてください。"
    if code == ValidationErrorCode.MISSING_HOOK:
        return "【重要】hookフィールドが空でした。視聴者の注意を引く冒頭フレーズを必ず含めてください。"
    if code == ValidationErrorCode.MISSING_BODY:
        return "【重要】bodyフィールドが空でした。本編の内容を必ず含めてください。"
    if code == ValidationErrorCode.MISSING_CTA:
        return "【重要】ctaフィールドが空でした。行動喚起を必ず含めてください。"
    if code == ValidationErrorCode.INVALID_ORDER:
        return "【重要】hook、context、body、proof、transition、ctaの順序を守って出力してください。"
    return None


def adjust_prompt(prompt: str, errors: List[ValidationIssue], current_length: int) -> str:
    """
    Append corrective directives for the next attempt.

    One directive per distinct issue code, in the order the codes first
    appear. The prompt passed in may already carry earlier corrections;
    new ones are appended after it.

    Args:
        prompt: Prompt used for the rejected attempt
        errors: Issues reported by the validator
        current_length: Measured length of the rejected candidate

    Returns:
        Adjusted prompt, or the prompt unchanged when no directive applies
    """
    adjustments = []
    seen = set()
    for error in errors:
        if error.code in seen:
            continue
        seen.add(error.code)

        directive = _directive_for(error.code, current_length)
        if directive:
            adjustments.append(directive)

    if not adjustments:
        return prompt

    return prompt + CORRECTION_SECTION_HEADER + "\n".join(adjustments)
