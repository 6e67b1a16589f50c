import pytest

from shorts_studio.agents.creative.tools_retry import (
    CORRECTION_SECTION_HEADER,
    adjust_prompt,
    can_retry,
    determine_retry_action,
)
from shorts_studio.core.state import RetryAction, ValidationErrorCode, ValidationIssue


def issue(code):
    return ValidationIssue(code=code, message="x")


TOO_SHORT = issue(ValidationErrorCode.TOO_SHORT)
TOO_LONG = issue(ValidationErrorCode.TOO_LONG)
EMOJI = issue(ValidationErrorCode.CONTAINS_EMOJI)
CTA_LIKE = issue(ValidationErrorCode.CTA_MISMATCH_LIKE)


@pytest.mark.parametrize("length,action,shortfall", [
    (230, RetryAction.RETRY_WITH_PROMPT, 20),
    (200, RetryAction.RETRY_WITH_PROMPT, 50),
    (199, RetryAction.REQUEST_MORE_INFO, 51),
    (100, RetryAction.REQUEST_MORE_INFO, 150),
])
def test_too_short_threshold(length, action, shortfall):
    decision = determine_retry_action([TOO_SHORT], length)
    assert decision.action == action
    assert decision.shortfall == shortfall
    assert decision.excess is None


@pytest.mark.parametrize("length,action,excess", [
    (415, RetryAction.RETRY_WITH_PROMPT, 15),
    (450, RetryAction.RETRY_WITH_PROMPT, 50),
    (480, RetryAction.REQUEST_MORE_INFO, 80),
])
def test_too_long_threshold(length, action, excess):
    decision = determine_retry_action([TOO_LONG], length)
    assert decision.action == action
    assert decision.excess == excess
    assert decision.shortfall is None


def test_length_takes_priority_over_other_issues():
    decision = determine_retry_action([CTA_LIKE, TOO_SHORT], 100)
    assert decision.action == RetryAction.REQUEST_MORE_INFO


@pytest.mark.parametrize("code", [
    ValidationErrorCode.CONTAINS_EMOJI,
    ValidationErrorCode.CTA_MISMATCH_LONG_VIDEO,
    ValidationErrorCode.CTA_MISMATCH_LIKE,
    ValidationErrorCode.CTA_MISMATCH_COMMENT,
    ValidationErrorCode.MISSING_HOOK,
    ValidationErrorCode.MISSING_BODY,
    ValidationErrorCode.MISSING_CTA,
    ValidationErrorCode.INVALID_ORDER,
])
def test_other_issues_retry_without_counts(code):
    decision = determine_retry_action([issue(code)], 300)
    assert decision.action == RetryAction.RETRY_WITH_PROMPT
    assert decision.shortfall is None
    assert decision.excess is None


def test_no_issues_means_no_retry():
    assert determine_retry_action([], 300).action == RetryAction.NO_RETRY


def test_can_retry_stops_at_three_attempts():
    assert [can_retry(attempt) for attempt in range(5)] == [True, True, True, False, False]


def test_adjust_prompt_without_errors_returns_prompt_unchanged():
    assert adjust_prompt("元のプロンプト", [], 300) == "元のプロンプト"


def test_adjust_prompt_appends_correction_section():
    adjusted = adjust_prompt("元のプロンプト", [TOO_SHORT, CTA_LIKE], 230)

    assert adjusted.startswith("元のプロンプト" + CORRECTION_SECTION_HEADER)
    assert "20文字ほど短すぎました" in adjusted
    assert "「いいね」「高評価」「グッド」" in adjusted
    assert adjusted.count("【重要】") == 2


def test_adjust_prompt_interpolates_excess():
    adjusted = adjust_prompt("p", [TOO_LONG], 415)
    assert "15文字ほど長すぎました" in adjusted


def test_adjust_prompt_one_directive_per_code():
    adjusted = adjust_prompt("p", [EMOJI, EMOJI, EMOJI], 300)
    assert adjusted.count("【重要】") == 1


def test_adjust_prompt_accumulates_on_adjusted_prompt():
    first = adjust_prompt("p", [EMOJI], 300)
    second = adjust_prompt(first, [CTA_LIKE], 300)

    assert second.startswith(first)
    assert second.count("## 修正指示") == 2
    assert second.count("【重要】") == 2
