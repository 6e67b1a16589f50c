"""
Script validation tools
Checks a script candidate for structure, emoji, length and CTA alignment
"""

import re
from typing import List

from ...core.config import SCRIPT_MIN_LENGTH, SCRIPT_MAX_LENGTH
from ...core.state import (
    CtaPurpose,
    Script,
    ValidationErrorCode,
    ValidationIssue,
    ValidationResult,
)
from ...prompts import CTA_KEYWORDS


# Emoji, pictographs, dingbats, variation selectors and regional indicators
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF"
    "\U0001F900-\U0001F9FF"
    "\U0001FA00-\U0001FA6F"
    "\U0001FA70-\U0001FAFF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "\uFE00-\uFE0F"
    "\u231A-\u231B"
    "\u23E9-\u23F3"
    "\u23F8-\u23FA"
    "\u25AA-\u25AB"
    "\u25B6"
    "\u25C0"
    "\u25FB-\u25FE"
    "\u2934-\u2935"
    "\u2B05-\u2B07"
    "\u2B1B-\u2B1C"
    "\u2B50"
    "\u2B55"
    "\u3030"
    "\u303D"
    "\u3297"
    "\u3299"
    "]"
)

CTA_ERROR_CODES = {
    CtaPurpose.LONG_VIDEO: ValidationErrorCode.CTA_MISMATCH_LONG_VIDEO,
    CtaPurpose.LIKE: ValidationErrorCode.CTA_MISMATCH_LIKE,
    CtaPurpose.COMMENT: ValidationErrorCode.CTA_MISMATCH_COMMENT,
}

CTA_PURPOSE_DESCRIPTIONS = {
    CtaPurpose.LONG_VIDEO: "長尺動画への誘導",
    CtaPurpose.LIKE: "高評価の促進",
    CtaPurpose.COMMENT: "コメントの促進",
}


def validate_script(script: Script, cta_purpose: CtaPurpose) -> ValidationResult:
    """
    Validate a script candidate against every rule.

    All checks run regardless of earlier failures so the caller sees the
    full list of problems at once. Never raises.

    Args:
        script: Candidate returned by the script model
        cta_purpose: The viewer action the CTA must ask for

    Returns:
        ValidationResult, valid only when no issue was found
    """
    errors: List[ValidationIssue] = []

    _check_structure(script, errors)
    _check_no_emoji(script, errors)
    _check_length(script, errors)
    _check_cta_purpose(script, CtaPurpose(cta_purpose), errors)

    return ValidationResult(valid=not errors, errors=errors)


def _check_structure(script: Script, errors: List[ValidationIssue]):
    if not script.hook.strip():
        errors.append(ValidationIssue(
            code=ValidationErrorCode.MISSING_HOOK,
            message="フック（hook）が存在しません。視聴者の注意を引く冒頭が必要です。"
        ))

    if not script.body.strip():
        errors.append(ValidationIssue(
            code=ValidationErrorCode.MISSING_BODY,
            message="本編（body）が存在しません。価値を提供する本編が必要です。"
        ))

    if not script.cta.strip():
        errors.append(ValidationIssue(
            code=ValidationErrorCode.MISSING_CTA,
            message="CTA（cta）が存在しません。行動を促す呼びかけが必要です。"
        ))


def _check_no_emoji(script: Script, errors: List[ValidationIssue]):
    # one issue no matter how many emoji appear
    if EMOJI_PATTERN.search(script.full_text()):
        errors.append(ValidationIssue(
            code=ValidationErrorCode.CONTAINS_EMOJI,
            message="台本に絵文字が含まれています。読み上げ用途として不適切です。"
        ))


def _check_length(script: Script, errors: List[ValidationIssue]):
    total_length = script.total_length()

    if total_length < SCRIPT_MIN_LENGTH:
        errors.append(ValidationIssue(
            code=ValidationErrorCode.TOO_SHORT,
            message=f"台本が短すぎます。{SCRIPT_MIN_LENGTH}文字以上必要です（現在: {total_length}文字）。"
        ))

    if total_length > SCRIPT_MAX_LENGTH:
        errors.append(ValidationIssue(
            code=ValidationErrorCode.TOO_LONG,
            message=f"台本が長すぎます。{SCRIPT_MAX_LENGTH}文字以下にしてください（現在: {total_length}文字）。"
        ))


def _check_cta_purpose(script: Script, cta_purpose: CtaPurpose, errors: List[ValidationIssue]):
    keywords = CTA_KEYWORDS[cta_purpose]

    # Substring match inside the CTA only; keywords elsewhere do not count
    if any(keyword in script.cta for keyword in keywords):
        return

    errors.append(ValidationIssue(
        code=CTA_ERROR_CODES[cta_purpose],
        message=(
            f"CTA目的「{CTA_PURPOSE_DESCRIPTIONS[cta_purpose]}」に対応するワード"
            f"（{'、'.join(keywords)}のいずれか）が含まれていません。"
        )
    ))
