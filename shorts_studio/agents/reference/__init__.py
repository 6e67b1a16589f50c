"""Reference video agents"""

from .video_analyzer import (
    VideoAnalyzer,
    validate_youtube_url,
    extract_video_id,
    fetch_video_info
)

__all__ = [
    'VideoAnalyzer',
    'validate_youtube_url',
    'extract_video_id',
    'fetch_video_info'
]
