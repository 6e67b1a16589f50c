"""Reference video analysis prompts"""

REFERENCE_ANALYSIS_PROMPT_TEMPLATE = {
    "template": """以下のYouTube動画のタイトルとチャンネル名から、ショート動画としての特徴を推測して分析してください。

【タイトル】
{title}

【チャンネル】
{channel_title}

以下のJSON形式で出力してください。他の文章は一切含めないでください。
{{
  "hookStyle": "フックのスタイル（例：衝撃・驚き系、質問系、数字系）",
  "tone": "トーン（例：カジュアル、フォーマル、エモーショナル）",
  "structure": "構成パターン（例：ストーリー形式、リスト形式、比較形式）"
}}""",
}
