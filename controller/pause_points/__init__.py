from controller.pause_points.segmenter import (
    build_segments,
    to_pause_points,
    video_duration,
)
from controller.pause_points.timecode import format_time, parse_time_input
from controller.pause_points.video_ref import get_youtube_video_id, is_valid_youtube_url

__all__ = [
    "build_segments",
    "format_time",
    "get_youtube_video_id",
    "is_valid_youtube_url",
    "parse_time_input",
    "to_pause_points",
    "video_duration",
]
