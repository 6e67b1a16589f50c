"""Script writing agent prompts"""

from typing import Dict, List, Sequence

from ..core.config import SCRIPT_MIN_LENGTH, SCRIPT_MAX_LENGTH
from ..core.state import CtaPurpose, HearingContext, HearingMessage


class NoTranscriptError(ValueError):
    """Raised when the hearing-aware prompt is requested without any hearing history"""


# Words the CTA must contain (substring, any one is enough) per purpose.
# Shared with the script validator.
CTA_KEYWORDS: Dict[CtaPurpose, List[str]] = {
    CtaPurpose.LONG_VIDEO: ["長尺", "本編", "フル"],
    CtaPurpose.LIKE: ["いいね", "高評価", "グッド"],
    CtaPurpose.COMMENT: ["コメント", "感想", "教えて"],
}

CTA_INSTRUCTIONS: Dict[CtaPurpose, str] = {
    CtaPurpose.LONG_VIDEO: "CTAでは長尺動画・本編・フル動画への誘導を行ってください。「長尺」「本編」「フル」などのワードを必ず含めてください。",
    CtaPurpose.LIKE: "CTAでは高評価・いいねを促してください。「いいね」「高評価」「グッド」などのワードを必ず含めてください。",
    CtaPurpose.COMMENT: "CTAではコメントを促してください。「コメント」「感想」「教えて」などのワードを必ず含めてください。",
}


# Script writing agent prompts
SCRIPT_AGENT_PROMPT_TEMPLATE = {
    "template": """あなたはYouTube Shorts向けの台本を作成する専門家です。

以下のトピックについて、30秒程度で読み上げられる台本を作成してください。

【トピック】
{topic}

{sections}

【CTA指示】
{cta_instruction}

{constraints}

{output_format}""",
}

HEARING_SCRIPT_PROMPT_TEMPLATE = {
    "template": """あなたはYouTube Shorts向けの台本を作成する専門家です。

【トピック】
{topic}

【ヒアリングで収集した情報】
{hearing_info}

{sections}

【CTA指示】
{cta_instruction}

{constraints}
- ヒアリングで収集した情報を必ず台本に反映してください

{output_format}""",
}

SCRIPT_SECTIONS = """【必須セクション】
以下の3つは必ず含めてください：
- hook: 視聴者の注意を引く冒頭（フック）
- body: 価値を提供する本編
- cta: 行動を促す呼びかけ

【任意セクション】
必要に応じて以下を追加できます：
- context: 前提・誰向けか・状況説明
- proof: 理由・具体例・根拠
- transition: 話の切り替え・強調"""

SCRIPT_CONSTRAINTS = f"""【制約】
- 絵文字は絶対に使用しないでください（読み上げ用途のため）
- 合計文字数は{SCRIPT_MIN_LENGTH}文字以上{SCRIPT_MAX_LENGTH}文字以下にしてください
- 自然な話し言葉で書いてください"""

SCRIPT_OUTPUT_FORMAT = """【出力形式】
以下のJSON形式で出力してください。他の文章は一切含めないでください。

{
  "hook": "フックのテキスト",
  "context": "前提のテキスト（任意）",
  "body": "本編のテキスト",
  "proof": "根拠のテキスト（任意）",
  "transition": "切り替えのテキスト（任意）",
  "cta": "CTAのテキスト"
}

任意セクションを含めない場合は、空文字にせずそのキーを省略してください。"""


def build_script_prompt(topic: str, cta_purpose: CtaPurpose) -> str:
    """
    Build the script prompt from a bare topic.

    Args:
        topic: What the short is about
        cta_purpose: Which viewer action the CTA must ask for

    Returns:
        Prompt text asking for a JSON script
    """
    return SCRIPT_AGENT_PROMPT_TEMPLATE["template"].format(
        topic=topic,
        sections=SCRIPT_SECTIONS,
        cta_instruction=CTA_INSTRUCTIONS[CtaPurpose(cta_purpose)],
        constraints=SCRIPT_CONSTRAINTS,
        output_format=SCRIPT_OUTPUT_FORMAT,
    )


def build_hearing_script_prompt(context: HearingContext) -> str:
    """
    Build the script prompt from a completed hearing.

    Args:
        context: Snapshot with topic, hearing history and CTA purpose

    Returns:
        Prompt text that embeds the hearing Q/A and asks for a JSON script

    Raises:
        NoTranscriptError: If the hearing history is empty
    """
    if not context.history:
        raise NoTranscriptError("ヒアリング情報がありません")

    return HEARING_SCRIPT_PROMPT_TEMPLATE["template"].format(
        topic=context.topic,
        hearing_info=format_hearing_info(context.history),
        sections=SCRIPT_SECTIONS,
        cta_instruction=CTA_INSTRUCTIONS[CtaPurpose(context.cta_purpose)],
        constraints=SCRIPT_CONSTRAINTS,
        output_format=SCRIPT_OUTPUT_FORMAT,
    )


def format_hearing_info(history: Sequence[HearingMessage]) -> str:
    """Render history as Q/A pairs; an unanswered trailing entry is left out"""
    lines = []
    # step through in pairs: question at i, answer at i + 1
    for i in range(0, len(history) - 1, 2):
        question = history[i]
        answer = history[i + 1]
        lines.append(f"Q: {question.content}")
        lines.append(f"A: {answer.content}")
        lines.append("")

    return "\n".join(lines).strip()
