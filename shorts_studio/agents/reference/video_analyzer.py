"""
Reference video analyzer.
Checks YouTube URLs, looks up video metadata over oEmbed and infers the
hook style, tone and structure of the reference with Gemini.
"""

import logging
import re
from typing import Optional
from urllib.parse import urlparse, parse_qs

import requests

from ...core.config import YOUTUBE_OEMBED_URL, YOUTUBE_REQUEST_TIMEOUT, ANALYSIS_LLM_CONFIG
from ...core.state import VideoAnalysis, VideoInfo, YouTubeUrlValidationResult
from ...prompts import REFERENCE_ANALYSIS_PROMPT_TEMPLATE, AGENT_REGISTRY
from ..base import parse_json_response

logger = logging.getLogger(__name__)

YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com", "youtu.be"}
VIDEO_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{11}$")
UNKNOWN_LABEL = "不明"


def _parse_url(url: str):
    """urlparse result, or None when the text is not an absolute URL"""
    if not url or not url.strip():
        return None
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not hostname:
        return None
    return parsed


def _label(value) -> str:
    return value if isinstance(value, str) and value else UNKNOWN_LABEL


def _valid_id(video_id: Optional[str]) -> Optional[str]:
    if video_id and VIDEO_ID_PATTERN.match(video_id):
        return video_id
    return None


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11 character video id from a YouTube URL.

    Supports youtu.be/ID, /watch?v=ID, /shorts/ID and /embed/ID.

    Returns:
        The video id, or None when the URL has none
    """
    parsed = _parse_url(url)
    if parsed is None:
        return None

    if parsed.hostname == "youtu.be":
        return _valid_id(parsed.path[1:])

    if parsed.path == "/watch":
        values = parse_qs(parsed.query).get("v")
        return _valid_id(values[0]) if values else None

    for prefix in ("/shorts/", "/embed/"):
        if parsed.path.startswith(prefix):
            return _valid_id(parsed.path.split("/")[2])

    return None


def validate_youtube_url(url: str) -> YouTubeUrlValidationResult:
    """Check that the URL is a YouTube video URL and carries a video id"""
    parsed = _parse_url(url)
    if parsed is None:
        return YouTubeUrlValidationResult(valid=False, error="INVALID_URL")

    if parsed.hostname not in YOUTUBE_HOSTS:
        return YouTubeUrlValidationResult(valid=False, error="NOT_YOUTUBE")

    video_id = extract_video_id(url)
    if not video_id:
        return YouTubeUrlValidationResult(valid=False, error="INVALID_URL")

    return YouTubeUrlValidationResult(valid=True, video_id=video_id)


def fetch_video_info(video_id: str) -> Optional[VideoInfo]:
    """
    Look up title and channel of a video through the YouTube oEmbed endpoint.

    Args:
        video_id: 11 character YouTube video id

    Returns:
        VideoInfo, or None when the video is private, deleted or unreachable
    """
    params = {
        "url": f"https://www.youtube.com/watch?v={video_id}",
        "format": "json"
    }

    try:
        response = requests.get(YOUTUBE_OEMBED_URL, params=params, timeout=YOUTUBE_REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning(f"[Reference Analyzer] oEmbed lookup failed for {video_id}: {type(e).__name__}: {e}")
        return None

    if not isinstance(data, dict) or not data.get("title"):
        logger.warning(f"[Reference Analyzer] oEmbed returned no title for {video_id}")
        return None

    return VideoInfo(
        title=data["title"],
        channel_title=data.get("author_name") or "",
        description=""
    )


class VideoAnalyzer:
    """Infers hook style, tone and structure of a reference video from its metadata"""

    def __init__(self, llm=None):
        if llm is None:
            from ...core.llm import get_llm
            llm = get_llm(
                gemini_configs=ANALYSIS_LLM_CONFIG,
                system_instruction=AGENT_REGISTRY["reference_analyzer"]["system_prompt"]
            )
        self.llm = llm

    def analyze(self, info: VideoInfo) -> Optional[VideoAnalysis]:
        """Return the analysis, or None when the model fails or its output is unusable"""
        prompt = REFERENCE_ANALYSIS_PROMPT_TEMPLATE["template"].format(
            title=info.title,
            channel_title=info.channel_title
        )

        try:
            raw_output = self.llm.invoke(prompt, response_schema="reference_analyzer")
        except Exception as e:
            logger.error(f"[Reference Analyzer] Analysis call failed: {type(e).__name__}: {e}")
            return None

        parsed = parse_json_response(raw_output or "")
        if not isinstance(parsed, dict):
            logger.warning("[Reference Analyzer] Analysis output is not a JSON object")
            return None

        return VideoAnalysis(
            hook_style=_label(parsed.get("hookStyle")),
            tone=_label(parsed.get("tone")),
            structure=_label(parsed.get("structure"))
        )
