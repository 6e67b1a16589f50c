"""Main FastAPI application for script generation, hearing and reference analysis"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .api_types import GenerateRequest, HearingRequest, YouTubeAnalyzeRequest
from ..core.config import API_TITLE, API_VERSION, LOG_LEVEL, is_llm_configured
from ..core.llm import GeminiHearingClient, GeminiScriptClient, HearingLLMClient, ScriptLLMClient
from ..core.state import (
    CtaPurpose,
    GenerationResult,
    HearingAIResponse,
    HearingResponseType,
    ScriptGenerationRequest,
    YouTubeAnalyzeResult,
)
from ..agents.creative.agent_script import ScriptGenerator
from ..agents.system.hearing_agent import HearingAgent
from ..agents.reference.video_analyzer import VideoAnalyzer, fetch_video_info, validate_youtube_url
from ..session.hearing_session import HearingSession

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_TITLE,
    description="Stateless backend that writes validated YouTube Shorts scripts",
    version=API_VERSION
)

# CORS configuration for client applications
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure with actual client domains in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Dependencies (tests override these)

def get_script_client() -> Optional[ScriptLLMClient]:
    """Live script model client, or None when no credentials are configured"""
    if not is_llm_configured():
        return None
    return GeminiScriptClient()


def get_hearing_client() -> Optional[HearingLLMClient]:
    if not is_llm_configured():
        return None
    return GeminiHearingClient()


def get_video_analyzer() -> Optional[VideoAnalyzer]:
    if not is_llm_configured():
        return None
    return VideoAnalyzer()


def get_video_info_fetcher() -> Callable:
    return fetch_video_info


def _respond(model: BaseModel, status_code: int = 200) -> JSONResponse:
    """Serialize with camelCase keys and absent fields left out"""
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(mode="json", by_alias=True, exclude_none=True)
    )


def _generation_error(message: str, status_code: int) -> JSONResponse:
    return _respond(GenerationResult(success=False, llm_error=message), status_code)


def _hearing_error(message: str, status_code: int) -> JSONResponse:
    return _respond(HearingAIResponse(type=HearingResponseType.ERROR, error=message), status_code)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "llm": "configured" if is_llm_configured() else "not_configured",
        "timestamp": datetime.now().isoformat()
    }


@app.post("/api/generate")
async def generate_script(
    request: GenerateRequest,
    script_client: Optional[ScriptLLMClient] = Depends(get_script_client)
):
    """Generate a validated script for a topic, optionally from a completed hearing"""
    if not request.topic or not request.topic.strip():
        return _generation_error("トピックが指定されていません", 400)

    try:
        cta_purpose = CtaPurpose(request.cta_purpose)
    except ValueError:
        return _generation_error("無効なCTA目的が指定されました", 400)

    if script_client is None:
        return _generation_error("APIキーが設定されていません", 500)

    try:
        history = None
        if request.history:
            # Server keeps no sessions: rebuild the completed hearing from the request
            session = HearingSession.from_request(request.topic, cta_purpose, request.history)
            history = list(session.get_context_for_generation().history)

        generation_request = ScriptGenerationRequest(
            topic=request.topic,
            cta_purpose=cta_purpose,
            history=history
        )
        generator = ScriptGenerator(script_client)
        result = await asyncio.to_thread(generator.generate, generation_request)
    except Exception as e:
        logger.exception(f"[API] Generation error: {type(e).__name__}: {e}")
        return _generation_error("台本生成中にエラーが発生しました", 500)

    logger.info(f"[API] Generation finished: success={result.success} attempts={generator.attempts}")
    return _respond(result)


@app.post("/api/hearing")
async def hearing_turn(
    request: HearingRequest,
    hearing_client: Optional[HearingLLMClient] = Depends(get_hearing_client)
):
    """Return the next hearing question, or a completion message"""
    if not request.topic or not request.topic.strip():
        return _hearing_error("トピックが指定されていません", 400)

    if hearing_client is None:
        return _hearing_error("APIキーが設定されていません", 500)

    try:
        agent = HearingAgent(hearing_client)
        response = await asyncio.to_thread(agent.generate_next_question, request.topic, request.history)
    except Exception as e:
        logger.exception(f"[API] Hearing error: {type(e).__name__}: {e}")
        return _hearing_error("ヒアリング中にエラーが発生しました", 500)

    return _respond(response)


@app.post("/api/youtube")
async def analyze_reference_video(
    request: YouTubeAnalyzeRequest,
    analyzer: Optional[VideoAnalyzer] = Depends(get_video_analyzer),
    fetch_info: Callable = Depends(get_video_info_fetcher)
):
    """Look up a reference video and infer its hook style, tone and structure"""
    validation = validate_youtube_url(request.url or "")
    if not validation.valid:
        message = "YouTube以外のURLは使用できません" if validation.error == "NOT_YOUTUBE" else "無効なURLです"
        return _respond(YouTubeAnalyzeResult(success=False, error=message), 400)

    try:
        video_info = await asyncio.to_thread(fetch_info, validation.video_id)
        if video_info is None:
            return _respond(YouTubeAnalyzeResult(
                success=False,
                error="動画情報を取得できませんでした。非公開または削除された動画の可能性があります。"
            ))

        analysis = None
        if analyzer is not None:
            analysis = await asyncio.to_thread(analyzer.analyze, video_info)
    except Exception as e:
        logger.exception(f"[API] Reference analysis error: {type(e).__name__}: {e}")
        return _respond(YouTubeAnalyzeResult(success=False, error="動画解析中にエラーが発生しました"), 500)

    result = YouTubeAnalyzeResult(success=True, video_info=video_info, analysis=analysis)
    content = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    # analysis is reported as null when it could not be produced
    content.setdefault("analysis", None)
    return JSONResponse(content=content)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
