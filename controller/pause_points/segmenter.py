import logging
import math
import re
from typing import List, Optional, Sequence

from controller.grading.scoring import round_half_up
from core.config import PAUSE_POINT_LIMIT, PAUSE_POINT_MIN_GAP_SECONDS
from schemas.lesson import CaptionItem, CaptionSegment, PausePoint

logger = logging.getLogger(__name__)


MIN_TEXT_CHARS = 3
SHORT_SEGMENT_SECONDS = 2
SHORT_SEGMENT_CHARS = 10

_BRACKETED_RE = re.compile(r"\[.*?\]")
_PARENTHETICAL_RE = re.compile(r"\(.*?\)")
_WHITESPACE_RE = re.compile(r"\s+")

_NON_SPEECH_PATTERNS = [
    re.compile(r"^\[.*\]$"),
    re.compile(r"^music$", re.IGNORECASE),
    re.compile(r"^applause$", re.IGNORECASE),
    re.compile(r"^laughter$", re.IGNORECASE),
    re.compile(r"^\(.*\)$"),
    re.compile(r"^♪.*♪$"),
    re.compile(r"^[♫♪♬♩]+$"),
]


def clean_caption_text(text: str) -> str:
    text = _BRACKETED_RE.sub("", text)
    text = _PARENTHETICAL_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_non_speech(text: str) -> bool:
    text = text.strip()
    return any(pattern.search(text) for pattern in _NON_SPEECH_PATTERNS)


def _to_segments(items: Sequence[CaptionItem]) -> List[CaptionSegment]:
    segments: List[CaptionSegment] = []
    for i, item in enumerate(items):
        text = clean_caption_text(item.text)
        if len(text) < MIN_TEXT_CHARS or is_non_speech(text):
            continue
        segments.append(
            CaptionSegment(
                id=i + 1,
                time=round_half_up(item.offset),
                subtitle=text,
                duration=item.duration,
                end=round_half_up(item.offset + item.duration),
            )
        )
    return segments


def _merge_short(segments: List[CaptionSegment]) -> List[CaptionSegment]:
    merged: List[CaptionSegment] = []
    current: Optional[CaptionSegment] = None
    for segment in segments:
        is_short = (
            segment.duration < SHORT_SEGMENT_SECONDS
            or len(segment.subtitle) < SHORT_SEGMENT_CHARS
        )
        if is_short and current is not None:
            current = current.model_copy(
                update={
                    "subtitle": f"{current.subtitle} {segment.subtitle}",
                    "duration": segment.end - current.time,
                    "end": segment.end,
                }
            )
            continue
        if not is_short and current is not None:
            merged.append(current)
        current = segment.model_copy()
    if current is not None:
        merged.append(current)
    return merged


def _space_out(
    segments: List[CaptionSegment], min_gap: float, limit: int
) -> List[CaptionSegment]:
    spaced: List[CaptionSegment] = []
    last_end = 0
    for segment in segments:
        if segment.time - last_end >= min_gap:
            spaced.append(segment)
            last_end = segment.end
    return spaced[:limit]


def build_segments(
    items: Sequence[CaptionItem],
    min_gap: Optional[float] = None,
    limit: Optional[int] = None,
) -> List[CaptionSegment]:
    """Turn raw caption lines into practice segments.

    Lines are cleaned and non-speech lines dropped, short lines are folded into
    the segment before them, and segments that start too soon after the
    previous kept one are skipped. At most ``limit`` segments are returned.
    """
    min_gap = PAUSE_POINT_MIN_GAP_SECONDS if min_gap is None else min_gap
    limit = PAUSE_POINT_LIMIT if limit is None else limit

    segments = _to_segments(items)
    merged = _merge_short(segments)
    spaced = _space_out(merged, min_gap, limit)
    logger.info(
        "Built %d practice segments from %d caption items (%d after cleanup, %d after merge).",
        len(spaced),
        len(items),
        len(segments),
        len(merged),
    )
    return spaced


def video_duration(items: Sequence[CaptionItem]) -> int:
    if not items:
        return 0
    last = items[-1]
    return math.ceil(last.offset + last.duration)


def to_pause_points(segments: Sequence[CaptionSegment]) -> List[PausePoint]:
    return [
        PausePoint(id=segment.id, time=segment.time, subtitle=segment.subtitle)
        for segment in segments
    ]
