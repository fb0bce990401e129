import re
from typing import List, Optional


# Checked in order; the first pattern that captures an id wins.
_YOUTUBE_ID_PATTERNS: List[re.Pattern] = [
    re.compile(r"(?:youtube\.com/watch\?v=)([^&\n?#]+)"),
    re.compile(r"(?:youtu\.be/)([^&\n?#]+)"),
    re.compile(r"(?:youtube\.com/shorts/)([^&\n?#]+)"),
    re.compile(r"(?:youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/v/([^&\n?#]+)"),
    re.compile(r"youtube\.com/.*[?&]v=([^&\n?#]+)"),
    re.compile(r"(?:m\.youtube\.com/watch\?v=)([^&\n?#]+)"),
]


def get_youtube_video_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    for pattern in _YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def is_valid_youtube_url(url: Optional[str]) -> bool:
    return get_youtube_video_id(url) is not None
