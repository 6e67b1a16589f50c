import pytest
import requests

from shorts_studio.agents.reference import video_analyzer
from shorts_studio.agents.reference.video_analyzer import (
    VideoAnalyzer,
    extract_video_id,
    fetch_video_info,
    validate_youtube_url,
)
from shorts_studio.core.state import VideoInfo

from .fakes import FakeLLM

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    f"https://www.youtube.com/watch?v={VIDEO_ID}",
    f"https://youtube.com/watch?v={VIDEO_ID}&t=42",
    f"https://m.youtube.com/watch?v={VIDEO_ID}",
    f"https://youtu.be/{VIDEO_ID}",
    f"https://www.youtube.com/shorts/{VIDEO_ID}",
    f"https://www.youtube.com/embed/{VIDEO_ID}",
    f"https://WWW.YouTube.com/shorts/{VIDEO_ID}",
])
def test_valid_youtube_urls(url):
    result = validate_youtube_url(url)
    assert result.valid
    assert result.video_id == VIDEO_ID
    assert extract_video_id(url) == VIDEO_ID


@pytest.mark.parametrize("url,error", [
    ("", "INVALID_URL"),
    ("not a url", "INVALID_URL"),
    ("https://vimeo.com/123456", "NOT_YOUTUBE"),
    ("https://www.youtube.com/", "INVALID_URL"),
    ("https://www.youtube.com/watch?v=short", "INVALID_URL"),
    ("https://youtu.be/", "INVALID_URL"),
])
def test_invalid_urls(url, error):
    result = validate_youtube_url(url)
    assert not result.valid
    assert result.error == error
    assert result.video_id is None


class FakeResponse:

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload or {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        return self.payload


@pytest.fixture
def oembed(monkeypatch):
    calls = []

    def install(response=None, error=None):
        def fake_get(url, params=None, timeout=None):
            calls.append((url, params, timeout))
            if error is not None:
                raise error
            return response
        monkeypatch.setattr(video_analyzer.requests, "get", fake_get)
        return calls

    return install


def test_fetch_video_info_reads_oembed(oembed):
    calls = oembed(FakeResponse(payload={"title": "朝5時に起きた結果", "author_name": "習慣チャンネル"}))
    info = fetch_video_info(VIDEO_ID)

    assert info == VideoInfo(title="朝5時に起きた結果", channel_title="習慣チャンネル", description="")
    url, params, timeout = calls[0]
    assert url == "https://www.youtube.com/oembed"
    assert params == {"url": f"https://www.youtube.com/watch?v={VIDEO_ID}", "format": "json"}
    assert timeout


def test_fetch_video_info_returns_none_on_http_error(oembed):
    oembed(FakeResponse(status_code=404))
    assert fetch_video_info(VIDEO_ID) is None


def test_fetch_video_info_returns_none_on_network_error(oembed):
    oembed(error=requests.exceptions.ConnectionError("offline"))
    assert fetch_video_info(VIDEO_ID) is None


def test_fetch_video_info_returns_none_without_title(oembed):
    oembed(FakeResponse(payload={"author_name": "x"}))
    assert fetch_video_info(VIDEO_ID) is None


def test_analyzer_parses_model_output():
    llm = FakeLLM(output='```json\n{"hookStyle": "数字系", "tone": "カジュアル", "structure": "リスト形式"}\n```')
    analysis = VideoAnalyzer(llm=llm).analyze(VideoInfo(title="朝の習慣5選", channel_title="習慣チャンネル"))

    assert analysis.hook_style == "数字系"
    assert analysis.tone == "カジュアル"
    assert analysis.structure == "リスト形式"
    prompt, kwargs = llm.calls[0]
    assert "朝の習慣5選" in prompt and "習慣チャンネル" in prompt
    assert kwargs == {"response_schema": "reference_analyzer"}


def test_analyzer_fills_missing_labels():
    analysis = VideoAnalyzer(llm=FakeLLM(output='{"tone": "フォーマル"}')).analyze(VideoInfo(title="t"))
    assert analysis.hook_style == "不明"
    assert analysis.tone == "フォーマル"


def test_analyzer_returns_none_on_failure():
    assert VideoAnalyzer(llm=FakeLLM(output="sorry")).analyze(VideoInfo(title="t")) is None
    assert VideoAnalyzer(llm=FakeLLM(error=RuntimeError("x"))).analyze(VideoInfo(title="t")) is None
