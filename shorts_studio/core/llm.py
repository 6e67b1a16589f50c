"""Gemini LLM integration and the oracle interfaces the agents depend on"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.callbacks.manager import CallbackManagerForLLMRun
from langchain_core.language_models.llms import LLM
from google import genai
from google.genai import types

from .config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    USE_VERTEX_AI,
    PROJECT_ID,
    LOCATION,
    SCRIPT_LLM_CONFIG,
    HEARING_LLM_CONFIG,
    get_credentials,
)
from .state import (
    REQUIRED_SCRIPT_FIELDS,
    HearingAIResponse,
    HearingMessage,
    HearingResponseType,
    LLMResponse,
    Script,
)
from ..schemas import get_schema

logger = logging.getLogger(__name__)


class ScriptLLMClient(ABC):
    """Generation oracle: turns a prompt into one script candidate"""

    @abstractmethod
    def generate_script(self, prompt: str) -> LLMResponse:
        """Return a parsed script, or an error with the raw output kept"""


class HearingLLMClient(ABC):
    """Dialogue oracle: proposes the next hearing question or declares completion"""

    @abstractmethod
    def ask(self, topic: str, history: Sequence[HearingMessage]) -> HearingAIResponse:
        """Return a question, a completion, or an error. Content may be absent."""


class GeminiLLM(LLM):
    """Gemini LLM implementation on the google-genai SDK (API key or Vertex AI)"""

    model_name: str = GEMINI_MODEL
    gemini_configs: Dict = {
        'max_output_tokens': 1024,
        'temperature': 1,
    }
    system_instruction: Optional[str] = None

    def __init__(self, **kwargs):
        """Initialize with custom parameters"""
        super().__init__()
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def setup_gemini(self):
        """Create a Gemini client, on Vertex AI when enabled"""
        if USE_VERTEX_AI:
            return genai.Client(
                vertexai=True,
                project=PROJECT_ID,
                location=LOCATION,
                credentials=get_credentials()
            )
        return genai.Client(api_key=GEMINI_API_KEY)

    def _call(
        self,
        prompt: str,
        stop: Optional[List[str]] = None,
        run_manager: Optional[CallbackManagerForLLMRun] = None,
        response_schema: Optional[str] = None,
        **kwargs: Any,
    ) -> str:
        """Send one prompt and return the response text ("" when the model returns none)

        Transport errors propagate to the caller.
        """
        client = self.setup_gemini()

        config_params = {
            "temperature": self.gemini_configs['temperature'],
            "max_output_tokens": self.gemini_configs['max_output_tokens'],
        }
        if self.system_instruction:
            config_params["system_instruction"] = self.system_instruction
        if stop:
            config_params["stop_sequences"] = stop

        if response_schema:
            try:
                config_params["response_mime_type"] = "application/json"
                config_params["response_schema"] = get_schema(response_schema, "gemini")
            except ValueError as e:
                logger.warning(f"[Gemini LLM] Error loading schema '{response_schema}': {e}")

        config = types.GenerateContentConfig(**config_params)

        logger.debug(f"[Gemini LLM] model={self.model_name} schema={response_schema} prompt_chars={len(prompt)}")
        response = client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=config
        )
        return response.text or ""

    @property
    def _llm_type(self):
        return "gemini"


def get_llm(**kwargs):
    """Get Gemini LLM instance

    Args:
        **kwargs: Configuration parameters passed to GeminiLLM

    Returns:
        GeminiLLM instance
    """
    # Always Gemini
    kwargs.pop('model', None)

    # Copy so callers never share a mutable config dict
    if 'gemini_configs' in kwargs:
        kwargs['gemini_configs'] = dict(kwargs['gemini_configs'])

    return GeminiLLM(**kwargs)


def parse_script_output(raw_output: str) -> LLMResponse:
    """
    Parse raw model text into a script candidate.

    The model output is never trusted: it must be a JSON object whose hook,
    body and cta are non-empty strings. Optional segments are kept only when
    they are strings. The raw text is carried in every result.

    Args:
        raw_output: Text returned by the model

    Returns:
        LLMResponse with either a script or an error message
    """
    from ..agents.base import extract_json

    try:
        parsed = json.loads(extract_json(raw_output))
    except ValueError:
        return LLMResponse(error="JSONのパースに失敗しました", raw_output=raw_output)

    if not isinstance(parsed, dict):
        return LLMResponse(error="パース結果がオブジェクトではありません", raw_output=raw_output)

    for field in REQUIRED_SCRIPT_FIELDS:
        value = parsed.get(field)
        if not isinstance(value, str) or value == "":
            return LLMResponse(
                error=f"必須フィールド「{field}」が欠けているか空です",
                raw_output=raw_output
            )

    optional = {
        field: parsed[field]
        for field in ("context", "proof", "transition")
        if isinstance(parsed.get(field), str)
    }

    script = Script(hook=parsed["hook"], body=parsed["body"], cta=parsed["cta"], **optional)
    return LLMResponse(script=script, raw_output=raw_output)


def parse_hearing_output(raw_output: str) -> HearingAIResponse:
    """Interpret hearing model output.

    Valid {"type", "content"} JSON is used as-is. Anything else that is not
    empty is treated as a question in plain text, and JSON with empty
    content keeps its type with the raw text as content. Empty output
    yields a question with no content so the caller can fall back.
    """
    from ..agents.base import parse_json_response

    text = (raw_output or "").strip()
    if not text:
        return HearingAIResponse(type=HearingResponseType.QUESTION)

    parsed = parse_json_response(text)
    if isinstance(parsed, dict) and parsed.get("type") in ("question", "complete"):
        content = parsed.get("content")
        return HearingAIResponse(
            type=HearingResponseType(parsed["type"]),
            content=content if isinstance(content, str) and content else text
        )

    return HearingAIResponse(type=HearingResponseType.QUESTION, content=text)


class GeminiScriptClient(ScriptLLMClient):
    """Live generation oracle backed by Gemini"""

    def __init__(self, llm: Optional[LLM] = None):
        if llm is None:
            from ..prompts import AGENT_REGISTRY
            llm = get_llm(
                gemini_configs=SCRIPT_LLM_CONFIG,
                system_instruction=AGENT_REGISTRY["script_agent"]["system_prompt"]
            )
        self.llm = llm

    def generate_script(self, prompt: str) -> LLMResponse:
        try:
            raw_output = self.llm.invoke(prompt, response_schema="script_agent")
        except Exception as e:
            logger.error(f"[Script LLM] Call failed: {type(e).__name__}: {e}")
            return LLMResponse(error=str(e) or type(e).__name__, raw_output="")

        if not raw_output:
            return LLMResponse(error="APIレスポンスにテキストが含まれていません", raw_output="")

        return parse_script_output(raw_output)


class GeminiHearingClient(HearingLLMClient):
    """Live dialogue oracle backed by Gemini"""

    def __init__(self, llm: Optional[LLM] = None):
        if llm is None:
            from ..prompts import HEARING_AGENT_PROMPT_TEMPLATE
            llm = get_llm(
                gemini_configs=HEARING_LLM_CONFIG,
                system_instruction=HEARING_AGENT_PROMPT_TEMPLATE["template"]
            )
        self.llm = llm

    def ask(self, topic: str, history: Sequence[HearingMessage]) -> HearingAIResponse:
        from ..prompts import build_hearing_user_message

        try:
            raw_output = self.llm.invoke(
                build_hearing_user_message(topic, history),
                response_schema="hearing_agent"
            )
        except Exception as e:
            logger.error(f"[Hearing LLM] Call failed: {type(e).__name__}: {e}")
            return HearingAIResponse(type=HearingResponseType.ERROR, error=str(e) or type(e).__name__)

        return parse_hearing_output(raw_output)
