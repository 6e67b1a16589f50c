"""Hearing agent prompts - the Q/A session that gathers material before a script is written"""

from typing import Sequence

from ..core.state import HearingMessage


HEARING_AGENT_PROMPT_TEMPLATE = {
    "template": """あなたはYouTube Shorts用の台本を作成するためのヒアリングを行うアシスタントです。

## 目的
ユーザーから必要な情報を収集し、質の高い台本を作成するための準備を行います。

## 収集すべき情報
- ターゲット視聴者（誰向けか）
- 伝えたいメッセージ
- 具体的なエピソードや数字
- 視聴者に取ってほしい行動

## ルール
- 1回に1つの質問のみ行う
- 質問は簡潔で答えやすいものにする
- 会話は日本語で行う
- 3〜5回の質問で十分な情報を収集する

## 出力形式
以下のJSON形式で出力してください：
- まだ質問が必要な場合: {"type": "question", "content": "質問内容"}
- 十分な情報が集まった場合: {"type": "complete", "content": "ヒアリング完了のメッセージ"}""",
}

# Deterministic questions used when the hearing model gives no content
OPENING_QUESTION_TEMPLATE = "「{topic}」についてのショート動画を作成しますね。まず、この動画は誰に向けたものですか？"

FALLBACK_QUESTIONS = [
    "具体的にどんなメッセージを伝えたいですか？",
    "視聴者にどんな行動を取ってほしいですか？",
    "何か具体的なエピソードや数字はありますか？",
]

HEARING_COMPLETE_MESSAGE = "ありがとうございます。台本作成に必要な情報が揃いました。"


def build_hearing_user_message(topic: str, history: Sequence[HearingMessage]) -> str:
    """Render topic and conversation so far as the user turn for the hearing model"""
    if not history:
        return f"""トピック: {topic}

このトピックについてヒアリングを開始してください。最初の質問をお願いします。"""

    conversation = "\n".join(
        f"{'AI' if message.role == 'assistant' else 'ユーザー'}: {message.content}"
        for message in history
    )

    return f"""トピック: {topic}

これまでの会話:
{conversation}

上記の会話を踏まえて、次の質問をするか、十分な情報が集まったと判断してください。"""
