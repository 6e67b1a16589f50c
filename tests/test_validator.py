import pytest

from shorts_studio.agents.creative.tools_script_validation import EMOJI_PATTERN, validate_script
from shorts_studio.core.state import CtaPurpose, Script, ValidationErrorCode

from .fakes import HOOK, LIKE_CTA, PLAIN_CTA, make_script


def codes(result):
    return [error.code for error in result.errors]


def test_valid_script_has_no_errors():
    result = validate_script(make_script(300), CtaPurpose.LIKE)
    assert result.valid
    assert result.errors == []


def test_missing_fields_each_get_their_own_code():
    script = Script(hook="   ", body="", cta="\n")
    result = validate_script(script, CtaPurpose.LIKE)

    assert not result.valid
    assert ValidationErrorCode.MISSING_HOOK in codes(result)
    assert ValidationErrorCode.MISSING_BODY in codes(result)
    assert ValidationErrorCode.MISSING_CTA in codes(result)
    # later checks still run
    assert ValidationErrorCode.TOO_SHORT in codes(result)
    assert ValidationErrorCode.CTA_MISMATCH_LIKE in codes(result)


def test_emoji_reported_once():
    script = make_script(300, hook="朝が変わる🎉✨", proof="理由は三つ🚀")
    result = validate_script(script, CtaPurpose.LIKE)
    assert codes(result) == [ValidationErrorCode.CONTAINS_EMOJI]


def test_plain_japanese_punctuation_is_not_emoji():
    script = make_script(300, hook="朝の習慣、知っていますか？「3分」で変わります！")
    assert validate_script(script, CtaPurpose.LIKE).valid


@pytest.mark.parametrize("char", [
    "\U0001F1E6",  # regional indicator
    "\uFE0F",  # lone variation selector
    "\u2705",  # dingbat
    "\u2728",
    "\u2B50",
    "\U0001F389",
])
def test_emoji_ranges_are_detected(char):
    script = make_script(300, proof=f"理由は三つ{char}")
    assert codes(validate_script(script, CtaPurpose.LIKE)) == [ValidationErrorCode.CONTAINS_EMOJI]


@pytest.mark.parametrize("field", ["hook", "context", "body", "proof", "transition", "cta"])
@pytest.mark.parametrize("sample", ["\u2705", "\U0001F1EF\U0001F1F5", "「3分」で変わります！"])
def test_emoji_check_matches_some_single_field(field, sample):
    fields = {"hook": HOOK, "body": "本編です。", "cta": LIKE_CTA}
    fields[field] = fields.get(field, "") + sample
    script = Script(**fields)

    flagged = ValidationErrorCode.CONTAINS_EMOJI in codes(validate_script(script, CtaPurpose.LIKE))
    assert flagged == any(EMOJI_PATTERN.search(segment) for segment in script.segments())
    assert flagged == bool(EMOJI_PATTERN.search(sample))


@pytest.mark.parametrize("length,expected", [
    (249, [ValidationErrorCode.TOO_SHORT]),
    (250, []),
    (400, []),
    (401, [ValidationErrorCode.TOO_LONG]),
])
def test_length_bounds_are_inclusive(length, expected):
    result = validate_script(make_script(length), CtaPurpose.LIKE)
    assert codes(result) == expected


def test_length_message_carries_measured_count():
    result = validate_script(make_script(230), CtaPurpose.LIKE)
    assert "230" in result.errors[0].message


def test_optional_segments_count_toward_length():
    script = make_script(260, context="忙しい社会人向け", transition="ここが大事")
    assert script.total_length() == 260
    assert validate_script(script, CtaPurpose.LIKE).valid


@pytest.mark.parametrize("purpose,cta,expected", [
    (CtaPurpose.LONG_VIDEO, "続きは本編でどうぞ。", []),
    (CtaPurpose.LONG_VIDEO, PLAIN_CTA, [ValidationErrorCode.CTA_MISMATCH_LONG_VIDEO]),
    (CtaPurpose.LIKE, "いいねで応援してください。", []),
    (CtaPurpose.LIKE, PLAIN_CTA, [ValidationErrorCode.CTA_MISMATCH_LIKE]),
    (CtaPurpose.COMMENT, "あなたの朝の習慣を教えてください。", []),
    (CtaPurpose.COMMENT, PLAIN_CTA, [ValidationErrorCode.CTA_MISMATCH_COMMENT]),
])
def test_cta_keywords_per_purpose(purpose, cta, expected):
    result = validate_script(make_script(300, cta=cta), purpose)
    assert codes(result) == expected


def test_cta_keyword_outside_cta_does_not_count():
    script = make_script(300, hook="高評価が集まる朝の習慣。", cta=PLAIN_CTA)
    assert codes(validate_script(script, CtaPurpose.LIKE)) == [ValidationErrorCode.CTA_MISMATCH_LIKE]


def test_cta_match_is_substring():
    script = make_script(300, cta="フルバージョンはこちら")
    assert validate_script(script, CtaPurpose.LONG_VIDEO).valid


def test_accepts_plain_string_purpose():
    assert validate_script(make_script(300, cta=LIKE_CTA), "like").valid
