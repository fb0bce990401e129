from typing import List

from controller.pause_points import (
    build_segments,
    format_time,
    get_youtube_video_id,
    is_valid_youtube_url,
    parse_time_input,
    to_pause_points,
    video_duration,
)
from controller.pause_points.segmenter import clean_caption_text, is_non_speech
from schemas.lesson import CaptionItem


def _captions() -> List[CaptionItem]:
    return [
        CaptionItem(text="[Music]", offset=0.0, duration=3.0),
        CaptionItem(text="Welcome back to the channel everyone", offset=3.2, duration=4.0),
        CaptionItem(text="so", offset=7.4, duration=0.5),
        CaptionItem(text="okay then", offset=7.9, duration=1.0),
        CaptionItem(text="Today we are learning about coffee", offset=10.0, duration=4.0),
        CaptionItem(text="(laughs) Let's start with the basics", offset=14.5, duration=3.0),
    ]


def test_format_time():
    assert format_time(0) == "0:00"
    assert format_time(65) == "1:05"
    assert format_time(125.9) == "2:05"
    assert format_time(600) == "10:00"


def test_parse_time_input():
    assert parse_time_input("1:30") == 90
    assert parse_time_input("45") == 45
    assert parse_time_input("2:xx") == 120
    assert parse_time_input("12abc") == 12
    assert parse_time_input("abc") == 0
    assert parse_time_input("") == 0


def test_get_youtube_video_id_formats():
    assert get_youtube_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10") == "dQw4w9WgXcQ"
    assert get_youtube_video_id("https://youtu.be/abc123?si=share") == "abc123"
    assert get_youtube_video_id("https://youtube.com/shorts/short42") == "short42"
    assert get_youtube_video_id("https://www.youtube.com/embed/emb7") == "emb7"
    assert get_youtube_video_id("https://www.youtube.com/v/legacy1") == "legacy1"
    assert get_youtube_video_id("https://www.youtube.com/playlist?list=PL1&v=vid9") == "vid9"
    assert get_youtube_video_id("https://m.youtube.com/watch?v=mob1") == "mob1"


def test_invalid_youtube_urls():
    assert get_youtube_video_id("https://vimeo.com/12345") is None
    assert get_youtube_video_id("") is None
    assert get_youtube_video_id(None) is None
    assert not is_valid_youtube_url("not a url")
    assert is_valid_youtube_url("https://youtu.be/abc123")


def test_clean_caption_text_and_non_speech():
    assert clean_caption_text("  [Music]  Hello   (softly) there ") == "Hello there"
    assert is_non_speech("Applause")
    assert is_non_speech("music")
    assert is_non_speech("♪♪♪")
    assert is_non_speech("♪ la la la ♪")
    assert not is_non_speech("Music is great")


def test_build_segments_merges_and_spaces():
    segments = build_segments(_captions(), min_gap=2, limit=8)

    assert [s.id for s in segments] == [2, 6]
    first, second = segments
    assert first.subtitle == "Welcome back to the channel everyone okay then"
    assert first.time == 3
    assert first.end == 9
    assert first.duration == 6
    # 14.5 rounds half up
    assert second.time == 15
    assert second.end == 18
    assert second.subtitle == "Let's start with the basics"


def test_build_segments_respects_limit():
    items = [
        CaptionItem(text=f"This is practice sentence number {i}", offset=i * 10.0, duration=5.0)
        for i in range(1, 13)
    ]
    assert len(build_segments(items, min_gap=2, limit=8)) == 8
    assert len(build_segments(items, min_gap=2, limit=3)) == 3


def test_build_segments_empty():
    assert build_segments([], min_gap=2, limit=8) == []


def test_caption_item_accepts_start_alias():
    item = CaptionItem.model_validate({"text": "hi there", "start": 1.5, "duration": 2})
    assert item.offset == 1.5


def test_video_duration():
    assert video_duration(_captions()) == 18
    assert video_duration([]) == 0


def test_to_pause_points():
    pauses = to_pause_points(build_segments(_captions(), min_gap=2, limit=8))
    assert [(p.id, p.time) for p in pauses] == [(2, 3), (6, 15)]
    assert pauses[1].subtitle == "Let's start with the basics"
